from dataclasses import dataclass, field
from typing import TypeAlias, Union, Any

MonoType: TypeAlias = Union[
  'TypeVariable',
  'Boolean',
  'Natural',
  'Arrow',
]

class TypeTerm:
  """
  Common behaviour of every type term: structural equality and a hash
  cached on the node when it is built.
  """
  _hash: int
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, TypeTerm):
      return NotImplemented
    return same_type(self, other)  # type: ignore[arg-type]
  def __hash__(self) -> int:
    return self._hash

@dataclass(frozen=True, eq=False)
class TypeVariable(TypeTerm):
  id: int
  _hash: int = field(init=False, repr=False)
  def __post_init__(self) -> None:
    if isinstance(self.id, bool) or not isinstance(self.id, int):
      raise TypeError(f"Type variable id must be an int, got {self.id!r}")
    if self.id < 0:
      raise ValueError(f"Type variable id must be non-negative, got {self.id}")
    object.__setattr__(self, "_hash", hash(("var", self.id)))
  def __repr__(self) -> str:
    return f"t{self.id}"

@dataclass(frozen=True, eq=False)
class Boolean(TypeTerm):
  _hash: int = field(init=False, repr=False)
  def __post_init__(self) -> None:
    object.__setattr__(self, "_hash", hash("Bool"))
  def __repr__(self) -> str:
    return "Bool"

@dataclass(frozen=True, eq=False)
class Natural(TypeTerm):
  _hash: int = field(init=False, repr=False)
  def __post_init__(self) -> None:
    object.__setattr__(self, "_hash", hash("Nat"))
  def __repr__(self) -> str:
    return "Nat"

@dataclass(frozen=True, eq=False)
class Arrow(TypeTerm):
  domain: MonoType
  codomain: MonoType
  _hash: int = field(init=False, repr=False)
  def __post_init__(self) -> None:
    if not is_type(self.domain):
      raise TypeError(f"Arrow domain must be a type, got {self.domain!r}")
    if not is_type(self.codomain):
      raise TypeError(f"Arrow codomain must be a type, got {self.codomain!r}")
    # children are already built, so their hashes are cached
    object.__setattr__(self, "_hash", hash(("->", self.domain._hash, self.codomain._hash)))
  def __repr__(self) -> str:
    return render(self)

BoolType = Boolean()
NatType = Natural()

def is_type(value: Any) -> bool:
  return isinstance(value, (TypeVariable, Boolean, Natural, Arrow))

def var(id: int) -> MonoType:
  return TypeVariable(id)

def boolean() -> MonoType:
  return BoolType

def nat() -> MonoType:
  return NatType

def arr(domain: MonoType, codomain: MonoType) -> MonoType:
  return Arrow(domain, codomain)

def same_type(type1: MonoType, type2: MonoType) -> bool:
  """
  Structural equality, walked with an explicit stack so that very deep
  arrow chains do not hit the interpreter's recursion limit.
  """
  pending = [(type1, type2)]
  while pending:
    a, b = pending.pop()
    if a is b:
      continue
    if type(a) is not type(b) or a._hash != b._hash:
      return False
    if isinstance(a, TypeVariable):
      assert isinstance(b, TypeVariable)
      if a.id != b.id:
        return False
    elif isinstance(a, Arrow):
      assert isinstance(b, Arrow)
      pending.append((a.codomain, b.codomain))
      pending.append((a.domain, b.domain))
  return True

def render(type: MonoType) -> str:
  """
  Arrows associate to the right, so only an arrow in domain position gets
  parentheses. Walked with an explicit stack like `same_type`.
  """
  parts: list[str] = []
  stack: list[MonoType | str] = [type]
  while stack:
    item = stack.pop()
    if isinstance(item, str):
      parts.append(item)
    elif isinstance(item, Arrow):
      stack.append(item.codomain)
      stack.append(" -> ")
      if isinstance(item.domain, Arrow):
        stack.extend([")", item.domain, "("])
      else:
        stack.append(item.domain)
    else:
      parts.append(repr(item))
  return "".join(parts)
