import subprocess
import sys
from pathlib import Path

root = Path(__file__).resolve().parent.parent
temp_path = "test/.temp.constraints"

def run_process(code: str, *flags: str) -> subprocess.CompletedProcess[bytes]:
  with open(root / temp_path, "w") as f:
    f.write(code)
  return subprocess.run([sys.executable, "main.py", temp_path, *flags], capture_output=True, cwd=root)

def run_test(code: str, *flags: str) -> str:
  return run_process(code, *flags).stdout.decode().strip()
