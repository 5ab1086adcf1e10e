"""
Property Records.

A resolved property is an immutable record naming the logical property and
carrying the binding needed to invoke it later. Every record is an
:class:`Accessor` (readable), a :class:`Mutator` (writable) or both.

Reflective records bind a :class:`~modelmap.handles.MemberHandle`; structural
records bind the member object reported by a value reader or writer and have
no static declaring type.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from modelmap.enums import PropertyType


class Accessor(ABC):
  """Capability of reading a value from a source."""

  @abstractmethod
  def get_value(self, source: Any) -> Any: ...


class Mutator(ABC):
  """Capability of writing a value to a destination."""

  @abstractmethod
  def set_value(self, destination: Any, value: Any) -> None: ...


@dataclass(frozen=True)
class PropertyInfo:
  """
  Common shape of every resolved property.

  Attributes:
      name (str): Logical name, identical to the property's table key.
      initial_type (Optional[type]): The class resolution started from.
      declaring_type (Optional[type]): The class declaring the member.
      member (Any): Binding used for invocation.
      property_type (PropertyType): FIELD, METHOD or GENERIC.
      value_type (Any): Declared value type, if known.
  """

  name: str
  initial_type: Optional[type]
  declaring_type: Optional[type]
  member: Any
  property_type: PropertyType
  value_type: Any = None


@dataclass(frozen=True)
class FieldPropertyInfo(PropertyInfo, Accessor, Mutator):
  """A field; readable and writable by attribute access."""

  def get_value(self, source: Any) -> Any:
    return self.member.get(source)

  def set_value(self, destination: Any, value: Any) -> None:
    self.member.set(destination, value)


@dataclass(frozen=True)
class MethodAccessor(PropertyInfo, Accessor):
  """A getter method or a ``property`` with a getter."""

  def get_value(self, source: Any) -> Any:
    if self.member.callable_member:
      return self.member.call(source)
    return self.member.get(source)


@dataclass(frozen=True)
class MethodMutator(PropertyInfo, Mutator):
  """A setter method or a ``property`` with a setter."""

  def set_value(self, destination: Any, value: Any) -> None:
    if self.member.callable_member:
      self.member.call(destination, value)
    else:
      self.member.set(destination, value)


@dataclass(frozen=True)
class ValueReaderPropertyInfo(PropertyInfo, Accessor):
  """
  Accessor over a structural source member.

  ``member_name`` keeps the raw name the reader reported; ``name`` is the
  transformed logical name.
  """

  member_name: str = ""

  @classmethod
  def from_member(cls, member: Any, member_name: str, name: str) -> "ValueReaderPropertyInfo":
    return cls(
      name=name,
      initial_type=None,
      declaring_type=None,
      member=member,
      property_type=PropertyType.GENERIC,
      value_type=getattr(member, "value_type", None),
      member_name=member_name,
    )

  def get_value(self, source: Any) -> Any:
    return self.member.get(source)


@dataclass(frozen=True)
class ValueWriterPropertyInfo(PropertyInfo, Mutator):
  """Mutator over a structural destination member."""

  member_name: str = ""

  @classmethod
  def from_member(cls, member: Any, member_name: str, name: str) -> "ValueWriterPropertyInfo":
    return cls(
      name=name,
      initial_type=None,
      declaring_type=None,
      member=member,
      property_type=PropertyType.GENERIC,
      value_type=getattr(member, "value_type", None),
      member_name=member_name,
    )

  def set_value(self, destination: Any, value: Any) -> None:
    self.member.set(destination, value)
