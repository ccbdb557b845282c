from lark.exceptions import UnexpectedInput
from parser import parse
from models import *
from unification import *

import logging
import sys

def run(code: str, file_path: str, is_debug: bool = False) -> int:
  try:
    source = parse(code, file_path)
  except UnexpectedInput as e:
    print(f"{Location(file_path, e.line, e.column)}: syntax error")
    return 1
  if is_debug:
    for name, variable in source.names.items():
      print(f"{name} is {variable}")
  res = solve(c.pair() for c in source.constraints)
  if isinstance(res, UnifyError):
    print(f"{source.constraints[res.origin].location}: {res.message}")
    return 1
  if not res:
    print(f"No bindings needed for {file_path}")
  for n in sorted(res):
    print(f"t{n} := {res[n]}")
  return 0

def main(argv: list[str]) -> int:
  file_path = None
  args = argv
  is_debug = False
  while args:
    if args[0] == "--debug":
      is_debug = True
      _, *args = args
    else:
      file_path = args[0]
      _, *args = args
  if file_path is None:
    print("usage: main.py FILE [--debug]", file=sys.stderr)
    return 2
  if is_debug:
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")
  with open(file_path) as f:
    input = f.read()
  return run(input, file_path, is_debug)

if __name__ == "__main__":
  sys.exit(main(sys.argv[1:]))
