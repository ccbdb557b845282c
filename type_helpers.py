from collections.abc import Iterator, Mapping
from typing import Optional
from type_models import *

class Substitution(Mapping[int, MonoType]):
  """
  A finite map from type-variable ids to types.

  Substitutions are values: the constructor copies its argument and nothing
  ever changes the copy afterwards, so one instance may be shared freely.
  Being a `Mapping`, a substitution compares equal to any mapping (a plain
  dict included) holding the same bindings.
  """
  def __init__(self, mapping: Optional[Mapping[int, MonoType]] = None) -> None:
    self._mapping: dict[int, MonoType] = dict(mapping or {})
    for n, t in self._mapping.items():
      if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"Substitution keys must be non-negative ints, got {n!r}")
      if not is_type(t):
        raise TypeError(f"Substitution for t{n} must be a type, got {t!r}")
  def __getitem__(self, id: int) -> MonoType:
    return self._mapping[id]
  def __iter__(self) -> Iterator[int]:
    return iter(self._mapping)
  def __len__(self) -> int:
    return len(self._mapping)
  def __repr__(self) -> str:
    bindings = ", ".join(f"t{n} := {self._mapping[n]}" for n in sorted(self._mapping))
    return "{" + bindings + "}"
  def apply_mono(self, m: MonoType) -> MonoType:
    return apply(m, self)
  def compose(self, s: 'Substitution') -> 'Substitution':
    return compose(self, s)

def apply(type: MonoType, s: Mapping[int, MonoType]) -> MonoType:
  """
  Replace every variable of `type` bound in `s` by its binding.

  Bindings are not re-applied to themselves. An arrow is rebuilt only when one
  of its sides actually changed; otherwise the original node comes back, so
  untouched sub-terms stay shared. Nodes shared inside `type` are visited once.
  """
  if not s:
    return type
  mapping = s._mapping if isinstance(s, Substitution) else s
  done: dict[int, MonoType] = {}
  stack: list[MonoType] = [type]
  while stack:
    node = stack[-1]
    key = id(node)
    if key in done:
      stack.pop()
      continue
    if isinstance(node, Arrow):
      domain = done.get(id(node.domain))
      codomain = done.get(id(node.codomain))
      if domain is None or codomain is None:
        if codomain is None:
          stack.append(node.codomain)
        if domain is None:
          stack.append(node.domain)
        continue
      stack.pop()
      if domain is node.domain and codomain is node.codomain:
        done[key] = node
      else:
        done[key] = Arrow(domain, codomain)
    elif isinstance(node, TypeVariable):
      stack.pop()
      done[key] = mapping.get(node.id, node)
    else:
      stack.pop()
      done[key] = node
  return done[id(type)]

def compose(s1: Mapping[int, MonoType], s2: Mapping[int, MonoType]) -> Substitution:
  """
  The substitution that does `s1` first and `s2` afterwards:
  apply(t, compose(s1, s2)) == apply(apply(t, s1), s2) for every type t.
  """
  s1 = as_substitution(s1)
  s2 = as_substitution(s2)
  if not s1:
    return s2
  composed: dict[int, MonoType] = {}
  for n, t in s1._mapping.items():
    res = apply(t, s2)
    if isinstance(res, TypeVariable) and res.id == n:
      # after s2 the binding maps its variable onto itself
      continue
    composed[n] = res
  for n, t in s2._mapping.items():
    if n not in s1._mapping:
      composed[n] = t
  return Substitution(composed)

def as_substitution(s: Mapping[int, MonoType]) -> Substitution:
  if isinstance(s, Substitution):
    return s
  return Substitution(s)

def occurs(var_id: int, type: MonoType) -> bool:
  seen: set[int] = set()
  stack = [type]
  while stack:
    node = stack.pop()
    if isinstance(node, TypeVariable):
      if node.id == var_id:
        return True
    elif isinstance(node, Arrow):
      if id(node) in seen:
        continue
      seen.add(id(node))
      stack.append(node.codomain)
      stack.append(node.domain)
  return False

def free_vars_of_type(type: MonoType) -> set[int]:
  found: set[int] = set()
  seen: set[int] = set()
  stack = [type]
  while stack:
    node = stack.pop()
    if isinstance(node, TypeVariable):
      found.add(node.id)
    elif isinstance(node, Arrow):
      if id(node) in seen:
        continue
      seen.add(id(node))
      stack.append(node.codomain)
      stack.append(node.domain)
  return found

class TypeVarSupply:
  """
  Hands out type variables nobody else is using. Pass one of these to
  whatever needs fresh variables instead of keeping a global counter.
  """
  def __init__(self, start: int = 0) -> None:
    self.next_id = start
  def fresh(self) -> TypeVariable:
    res = TypeVariable(self.next_id)
    self.next_id += 1
    return res
  def reserve(self, id: int) -> None:
    self.next_id = max(self.next_id, id + 1)
