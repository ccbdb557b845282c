import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Optional, TypeAlias
from type_models import *
from type_helpers import *

logger = logging.getLogger(__name__)

Constraint: TypeAlias = tuple[MonoType, MonoType]

@dataclass
class UnifyError:
  """
  Why a constraint set has no unifier. `origin` is the position of the
  caller's constraint that the failing pair was derived from; `left` and
  `right` are that pair after the bindings found so far were applied.
  """
  origin: int
  left: MonoType
  right: MonoType
  kind: Literal["occurs", "mismatch"]
  @property
  def message(self) -> str:
    if self.kind == "occurs":
      return f"Infinite type: `{self.left}` occurs in `{self.right}`"
    return f"Types dont unify: `{self.left}` and `{self.right}`"

UnifyResult: TypeAlias = UnifyError | Substitution

def solve(constraints: Iterable[Constraint]) -> UnifyResult:
  """
  Robinson unification over a work list. Returns the most general
  substitution solving every constraint, or a `UnifyError` for the first
  pair that cannot be solved.
  """
  pending: list[tuple[MonoType, MonoType, int]] = []
  for origin, (left, right) in enumerate(constraints):
    if not is_type(left) or not is_type(right):
      raise TypeError(f"Constraint {origin} must pair two types, got {left!r} and {right!r}")
    pending.append((left, right, origin))
  # the list is popped from the end, so reverse it to work in the given order
  pending.reverse()
  s = Substitution({})
  while pending:
    left, right, origin = pending.pop()
    type1 = apply(left, s)
    type2 = apply(right, s)
    if type1 == type2:
      continue
    if isinstance(type1, TypeVariable):
      if occurs(type1.id, type2):
        return occurs_failure(origin, type1, type2)
      s = bind(s, type1, type2)
    elif isinstance(type2, TypeVariable):
      if occurs(type2.id, type1):
        return occurs_failure(origin, type2, type1)
      s = bind(s, type2, type1)
    elif isinstance(type1, Arrow) and isinstance(type2, Arrow):
      logger.debug("decompose %s = %s", type1, type2)
      pending.append((type1.codomain, type2.codomain, origin))
      pending.append((type1.domain, type2.domain, origin))
    else:
      logger.debug("mismatch %s = %s", type1, type2)
      return UnifyError(origin, type1, type2, "mismatch")
  return s

def unify(constraints: Iterable[Constraint]) -> Optional[Substitution]:
  res = solve(constraints)
  if isinstance(res, UnifyError):
    return None
  return res

def bind(s: Substitution, variable: TypeVariable, type: MonoType) -> Substitution:
  logger.debug("bind %s := %s", variable, type)
  return compose(s, Substitution({variable.id: type}))

def occurs_failure(origin: int, variable: TypeVariable, type: MonoType) -> UnifyError:
  logger.debug("occurs check: %s in %s", variable, type)
  return UnifyError(origin, variable, type, "occurs")
