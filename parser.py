from lark import Lark, Transformer, Token, Tree, v_args
from lark.tree import Meta
from typing import Any, Optional
from models import *
from type_models import *
from type_helpers import TypeVarSupply

grammar = r"""
start: (_sep | constraint _sep)* constraint?

constraint: type "=" type

?type: atom "->" type -> arrow
     | atom

?atom: "Bool" -> bool_type
     | "Nat" -> nat_type
     | VAR_ID -> indexed_var
     | NAME -> named_var
     | "(" type ")"

_sep: _NL | ";"

VAR_ID: /t[0-9]+/
NAME: /'[A-Za-z_][A-Za-z0-9_]*/
COMMENT: /#[^\n]*/
_NL: /(\r?\n)+/

%import common.WS_INLINE
%ignore WS_INLINE
%ignore COMMENT
"""

parser = Lark(grammar, propagate_positions=True)

def get_loc(file_path: str, node: Token | Tree[Any] | Meta) -> Location:
  if isinstance(node, Token):
    assert node.line is not None
    assert node.column is not None
    return Location(file_path, node.line, node.column)
  if isinstance(node, Tree):
    node = node.meta
  if isinstance(node, Meta):
    if node.empty:
      return Location(file_path, 0, 0)
    return Location(file_path, node.line, node.column)
  assert False, f"get_loc: Argument must be either a Token or a Tree, got {node}"

class ToConstraints(Transformer[Tree[Any], Any]):
  def __init__(self, file_path: str, supply: TypeVarSupply) -> None:
    super().__init__()
    self.file_path = file_path
    self.supply = supply
    self.names: dict[str, TypeVariable] = {}
  def start(self, args: list[ConstraintDecl]) -> BaseNode:
    return ConstraintFile(Location(self.file_path, 1, 1), list(args), self.names)
  @v_args(meta=True)
  def constraint(self, meta: Meta, args: tuple[MonoType, MonoType]) -> BaseNode:
    left, right = args
    return ConstraintDecl(get_loc(self.file_path, meta), left, right)
  def arrow(self, args: tuple[MonoType, MonoType]) -> MonoType:
    domain, codomain = args
    return arr(domain, codomain)
  def bool_type(self, args: list[Any]) -> MonoType:
    return boolean()
  def nat_type(self, args: list[Any]) -> MonoType:
    return nat()
  def indexed_var(self, args: tuple[Token]) -> MonoType:
    return var(int(args[0].value[1:]))
  def named_var(self, args: tuple[Token]) -> MonoType:
    name = args[0].value
    if name not in self.names:
      self.names[name] = self.supply.fresh()
    return self.names[name]

def parse(code: str, file_path: str = "<input>", supply: Optional[TypeVarSupply] = None) -> ConstraintFile:
  tree: Tree[Any] = parser.parse(code)
  supply = supply or TypeVarSupply()
  # named variables must not take an id written out explicitly anywhere in the file
  for token in tree.scan_values(lambda v: isinstance(v, Token) and v.type == "VAR_ID"):
    supply.reserve(int(token.value[1:]))
  res = ToConstraints(file_path, supply).transform(tree)
  assert isinstance(res, ConstraintFile)
  return res
