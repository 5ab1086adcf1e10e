"""
Structural Value Readers.

Readers expose the members of values that carry no static shape, such as
``dict`` documents decoded from JSON or ``types.SimpleNamespace`` bags.
"""

import inspect
import types
from collections.abc import Mapping
from typing import Any, List, Optional


class KeyMember:
  """Reads one key of a mapping."""

  def __init__(self, name: str, value_type: Any = None):
    self.name = name
    self.value_type = value_type

  def get(self, source: Any) -> Any:
    return source[self.name]

  def __repr__(self) -> str:
    return f"KeyMember({self.name!r})"


class AttributeMember:
  """Reads one attribute of an object."""

  def __init__(self, name: str, value_type: Any = None):
    self.name = name
    self.value_type = value_type

  def get(self, source: Any) -> Any:
    return getattr(source, self.name)

  def __repr__(self) -> str:
    return f"AttributeMember({self.name!r})"


class MappingReader:
  """
  Reads any :class:`collections.abc.Mapping`.

  Only string keys are reported as members, in the mapping's iteration order.
  """

  def supports(self, type_: type) -> bool:
    return inspect.isclass(type_) and issubclass(type_, Mapping)

  def member_names(self, source: Mapping) -> List[str]:
    return [key for key in source.keys() if isinstance(key, str)]

  def get_member(self, source: Mapping, name: str) -> Optional[KeyMember]:
    if name not in source:
      return None
    value = source[name]
    return KeyMember(name, type(value) if value is not None else None)


class NamespaceReader:
  """Reads ``types.SimpleNamespace`` instances through their ``__dict__``."""

  def supports(self, type_: type) -> bool:
    return inspect.isclass(type_) and issubclass(type_, types.SimpleNamespace)

  def member_names(self, source: types.SimpleNamespace) -> List[str]:
    return list(vars(source))

  def get_member(self, source: types.SimpleNamespace, name: str) -> Optional[AttributeMember]:
    values = vars(source)
    if name not in values:
      return None
    value = values[name]
    return AttributeMember(name, type(value) if value is not None else None)
