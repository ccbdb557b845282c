from dataclasses import dataclass
from type_models import MonoType, TypeVariable

@dataclass
class Location:
  file: str
  line: int
  column: int
  def __repr__(self) -> str:
    return f"{self.file}:{self.line}:{self.column}"

@dataclass
class BaseNode:
  location: Location

@dataclass
class ConstraintDecl(BaseNode):
  left: MonoType
  right: MonoType
  def pair(self) -> tuple[MonoType, MonoType]:
    return self.left, self.right

@dataclass
class ConstraintFile(BaseNode):
  constraints: list[ConstraintDecl]
  names: dict[str, TypeVariable]
