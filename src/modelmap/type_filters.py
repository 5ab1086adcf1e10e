"""
Type Filters for Hierarchy Traversal.

Decides which classes are worth walking for properties. Scalar value types
(strings, numbers, dates, ...) never contain mappable properties, and classes
from the runtime and well-known frameworks would only pollute results with
their own plumbing (``pydantic.BaseModel.model_dump`` would otherwise look
like an accessor).

The exclusion set is policy: :class:`TypeExclusions` is part of the
configuration and can be extended per project.
"""

import datetime
import enum
import inspect
import numbers
import pathlib
import uuid
from typing import Any, List, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

_VALUE_TYPES: Tuple[type, ...] = (
  str,
  bytes,
  bytearray,
  bool,
  numbers.Number,
  datetime.date,
  datetime.time,
  datetime.timedelta,
  uuid.UUID,
  pathlib.PurePath,
  type(None),
)

DEFAULT_EXCLUDED_MODULES: Tuple[str, ...] = (
  "builtins",
  "abc",
  "typing",
  "typing_extensions",
  "enum",
  "collections",
  "numbers",
  "pydantic",
  "pydantic_core",
)


class TypeExclusions(BaseModel):
  """
  Classes skipped during hierarchy traversal.

  A class is excluded when it is listed in ``excluded_types`` or defined in a
  module listed in ``excluded_modules`` (a listed package covers its submodules).
  """

  model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

  excluded_types: Tuple[Type[Any], ...] = Field(
    default=(object, enum.Enum),
    description="Classes that never contribute properties.",
  )
  excluded_modules: Tuple[str, ...] = Field(
    default=DEFAULT_EXCLUDED_MODULES,
    description="Modules (and their submodules) whose classes never contribute properties.",
  )

  def is_internal(self, type_: type) -> bool:
    if type_ in self.excluded_types:
      return True
    module = getattr(type_, "__module__", None) or ""
    return any(module == m or module.startswith(f"{m}.") for m in self.excluded_modules)

  def with_types(self, *types: type) -> "TypeExclusions":
    """Returns a copy that additionally excludes ``types``."""
    return TypeExclusions(excluded_types=self.excluded_types + types, excluded_modules=self.excluded_modules)

  def with_modules(self, *modules: str) -> "TypeExclusions":
    """Returns a copy that additionally excludes classes from ``modules``."""
    return TypeExclusions(excluded_types=self.excluded_types, excluded_modules=self.excluded_modules + modules)


def might_contain_properties(type_: type) -> bool:
  """
  Checks whether a class can hold mappable properties at all.

  Args:
      type_: The class to check.

  Returns:
      bool: False for non-classes and for scalar value types and their subclasses.
  """
  if not inspect.isclass(type_):
    return False
  return not issubclass(type_, _VALUE_TYPES)


def ancestors(type_: type) -> List[type]:
  """
  Lists the ancestors of a class, most-ancestral first.

  The chain is the reversed method resolution order without the class itself,
  ``object`` and ``enum.Enum``. Every class appears after all the classes it
  overrides, also under multiple inheritance.
  """
  return [c for c in reversed(type_.__mro__[1:]) if c is not object and c is not enum.Enum]


def is_public_type(type_: type) -> bool:
  """A class is non-public when its name starts with an underscore."""
  return not type_.__name__.startswith("_")
