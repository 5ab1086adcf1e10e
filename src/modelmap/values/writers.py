"""
Structural Value Writers.

Writers describe destinations that are filled by key rather than by attribute.
A writer that supports member enumeration can list the members of a
destination *type*, which lets mutators be resolved without reflection.
"""

from typing import Any, List, Optional, is_typeddict


class KeyWriterMember:
  """Writes one key of a mapping."""

  def __init__(self, name: str, value_type: Any = None):
    self.name = name
    self.value_type = value_type

  def set(self, destination: Any, value: Any) -> None:
    destination[self.name] = value

  def __repr__(self) -> str:
    return f"KeyWriterMember({self.name!r})"


class TypedDictWriter:
  """
  Writes ``TypedDict`` destinations.

  The declared keys (inherited keys included) are the destination's members.
  """

  def supports(self, type_: type) -> bool:
    return is_typeddict(type_)

  def supports_member_enumeration(self) -> bool:
    return True

  def member_names(self, type_: type) -> List[str]:
    return list(type_.__annotations__)

  def get_member(self, type_: type, name: str) -> Optional[KeyWriterMember]:
    annotations = type_.__annotations__
    if name not in annotations:
      return None
    return KeyWriterMember(name, annotations[name])
