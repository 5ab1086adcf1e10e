"""
Enumerations for modelmap.

This module defines the small closed sets of tags shared by the discovery
layer: access policy levels, member visibility, member kinds and the
property/nameable categories passed to naming policies.
"""

from enum import Enum


class AccessLevel(str, Enum):
  """
  Configured visibility policy, ordered from strictest to most relaxed.

  Each level admits everything the previous one admits.
  """

  PUBLIC = "public"
  PROTECTED = "protected"
  PACKAGE_PRIVATE = "package_private"  # everything except strictly private
  PRIVATE = "private"


class Visibility(str, Enum):
  """
  Visibility of a single member, derived from its declared name.

  ``name`` is public, ``_name`` is protected and ``__name`` (name-mangled) is private.
  """

  PUBLIC = "public"
  PROTECTED = "protected"
  PRIVATE = "private"


class MemberKind(str, Enum):
  """Selects which Member Enumerator variant lists and validates members."""

  FIELD = "field"
  ACCESSOR = "accessor"
  MUTATOR = "mutator"


class PropertyType(str, Enum):
  """
  Category of a resolved property.

  Passed to naming conventions so they can treat fields and methods differently.
  GENERIC marks structurally resolved members (no static declaring type).
  """

  FIELD = "field"
  METHOD = "method"
  GENERIC = "generic"


class NameableType(str, Enum):
  """Category of a raw name handed to a name transformer."""

  FIELD = "field"
  METHOD = "method"
  GENERIC = "generic"
