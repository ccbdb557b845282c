from util import run_test, run_process

def test_basic_binding() -> None:
  assert run_test(
    """
      t0 = Nat
    """) == "t0 := Nat"

def test_basic_decomposition() -> None:
  assert run_test(
    """
      t0 = Nat
      t1 -> t0 = Bool -> t2
    """) == "t0 := Nat\nt1 := Bool\nt2 := Nat"

def test_basic_semicolons_and_comments() -> None:
  assert run_test(
    """
      # the identity applied to a number
      t0 = t1 -> t1; t0 = Nat -> t2  # result
    """) == "t0 := Nat -> Nat\nt1 := Nat\nt2 := Nat"

def test_basic_empty() -> None:
  assert run_test(
    """
    """) == "No bindings needed for test/.temp.constraints"

def test_basic_already_satisfied() -> None:
  assert run_test(
    """
      (t0 -> Bool) -> t0 = (t0 -> Bool) -> t0
    """) == "No bindings needed for test/.temp.constraints"

def test_basic_named_variables() -> None:
  assert run_test(
    """
      'a = Nat -> 'b
      'b = Bool
    """) == "t0 := Nat -> Bool\nt1 := Bool"

def test_basic_named_variables_avoid_numbered_ones() -> None:
  assert run_test(
    """
      'a = t3
    """) == "t4 := t3"

def test_basic_debug_lists_names() -> None:
  assert run_test(
    """
      'x = Nat
    """, "--debug") == "'x is t0\nt0 := Nat"

def test_basic_debug_logs_to_stderr() -> None:
  res = run_process("t0 -> t1 = Nat -> Bool\n", "--debug")
  assert res.returncode == 0
  err = res.stderr.decode()
  assert "unification: decompose t0 -> t1 = Nat -> Bool" in err
  assert "unification: bind t0 := Nat" in err

def test_basic_mismatch() -> None:
  assert run_test("Nat = Bool\n") == "test/.temp.constraints:1:1: Types dont unify: `Nat` and `Bool`"

def test_basic_mismatch_reports_original_constraint() -> None:
  assert run_test("t0 = Nat\nt0 -> t0 = Nat -> Bool\n") == (
    "test/.temp.constraints:2:1: Types dont unify: `Nat` and `Bool`"
  )

def test_basic_occurs_check() -> None:
  assert run_test("t0 = Nat -> t0\n") == "test/.temp.constraints:1:1: Infinite type: `t0` occurs in `Nat -> t0`"

def test_basic_failure_exit_status() -> None:
  assert run_process("Bool = Bool -> Bool\n").returncode == 1
  assert run_process("t0 = Bool\n").returncode == 0

def test_basic_syntax_error() -> None:
  res = run_process("Nat = = Bool\n")
  assert res.returncode == 1
  assert res.stdout.decode().strip().endswith(": syntax error")
