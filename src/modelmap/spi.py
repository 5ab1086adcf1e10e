"""
Service Provider Interfaces.

Contracts implemented by configuration collaborators and consumed by the
discovery layer. Concrete policies live in :mod:`modelmap.conventions` and
:mod:`modelmap.values`; users may supply their own objects satisfying these
protocols.
"""

from typing import Any, List, Optional, Protocol

from modelmap.enums import NameableType, PropertyType


class NamingConvention(Protocol):
  """Decides whether a raw member name qualifies as a property name."""

  def applies(self, name: str, property_type: PropertyType) -> bool: ...


class NameTransformer(Protocol):
  """Derives the logical property name from a raw member name."""

  def transform(self, name: str, nameable_type: NameableType) -> str: ...


class ReaderMember(Protocol):
  """A named member of a structural source."""

  name: str
  value_type: Any

  def get(self, source: Any) -> Any: ...


class WriterMember(Protocol):
  """A named member of a structural destination."""

  name: str
  value_type: Any

  def set(self, destination: Any, value: Any) -> None: ...


class ValueReader(Protocol):
  """
  Reads named members from values that expose them without static reflection,
  such as decoded documents.
  """

  def supports(self, type_: type) -> bool: ...

  def member_names(self, source: Any) -> List[str]: ...

  def get_member(self, source: Any, name: str) -> Optional[ReaderMember]: ...


class ValueWriter(Protocol):
  """Writes named members into structural destinations."""

  def supports(self, type_: type) -> bool: ...

  def supports_member_enumeration(self) -> bool: ...

  def member_names(self, type_: type) -> List[str]: ...

  def get_member(self, type_: type, name: str) -> Optional[WriterMember]: ...
