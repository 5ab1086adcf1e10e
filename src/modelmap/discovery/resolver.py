"""
Resolution Facade.

Entry points used by the mapping engine. Each call picks one of two
interchangeable providers of a property table:

*   **Structural**: when the configuration holds a value reader (accessors) or
    a member-enumerating value writer (mutators) supporting the type.
*   **Reflective**: otherwise. The method pass runs after the optional field
    pass, so a method wins over a field resolving to the same logical name.

Callers never need to know which provider produced a table.
"""

import inspect
import logging
from typing import Any, Dict, Optional

from modelmap.config import Configuration
from modelmap.discovery.hierarchy import resolve_properties, resolve_request
from modelmap.discovery.structural import resolve_accessors_from_value_reader, resolve_mutators_from_value_writer
from modelmap.properties import PropertyInfo

logger = logging.getLogger(__name__)


def resolve_accessors(source: Any, type_: Optional[type] = None, config: Optional[Configuration] = None) -> Dict[str, PropertyInfo]:
  """
  Resolves the readable properties of a source.

  Args:
      source: The source value, or None when only the type is known.
      type_: The source type. Defaults to ``type(source)``.
      config: The configuration bundle. Defaults to ``Configuration()``.

  Returns:
      Dict[str, PropertyInfo]: Accessors keyed by logical name.

  Raises:
      TypeError: If no class can be determined.
      MemberAccessError: If an accepted non-public member cannot be unlocked.
  """
  config = config or Configuration()
  if type_ is None:
    if source is None:
      raise TypeError("resolve_accessors needs a source value or a type")
    type_ = type(source)
  _check_class(type_)

  value_reader = config.structural_reader_for(type_)
  if source is not None and value_reader is not None:
    logger.debug(f"Resolving accessors of {type_.__qualname__} with {type(value_reader).__name__}")
    return resolve_accessors_from_value_reader(source, config, value_reader)
  return _resolve_reflectively(type_, True, config)


def resolve_mutators(type_: type, config: Optional[Configuration] = None) -> Dict[str, PropertyInfo]:
  """
  Resolves the writable properties of a destination type.

  Args:
      type_: The destination type.
      config: The configuration bundle. Defaults to ``Configuration()``.

  Returns:
      Dict[str, PropertyInfo]: Mutators keyed by logical name.

  Raises:
      TypeError: If ``type_`` is not a class.
      MemberAccessError: If an accepted non-public member cannot be unlocked.
  """
  config = config or Configuration()
  _check_class(type_)

  value_writer = config.structural_writer_for(type_)
  if value_writer is not None and value_writer.supports_member_enumeration():
    logger.debug(f"Resolving mutators of {type_.__qualname__} with {type(value_writer).__name__}")
    return resolve_mutators_from_value_writer(type_, config, value_writer)
  return _resolve_reflectively(type_, False, config)


def _resolve_reflectively(type_: type, access: bool, config: Configuration) -> Dict[str, PropertyInfo]:
  properties: Dict[str, PropertyInfo] = {}
  if config.field_matching_enabled:
    properties.update(resolve_properties(type_, resolve_request(config, access, field=True)))
  properties.update(resolve_properties(type_, resolve_request(config, access, field=False)))
  return properties


def _check_class(type_: Any) -> None:
  if not inspect.isclass(type_):
    raise TypeError(f"Expected a class, got {type_!r}")
