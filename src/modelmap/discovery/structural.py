"""
Structural Property Resolution.

Resolves properties of structurally-typed sources and destinations, such as
decoded documents, through a registered value reader or writer instead of
reflection. Structural values report their full, flattened member set, so
there is no hierarchy walk and no visibility policy. Only the name transformer
runs, with ``NameableType.GENERIC``.
"""

from typing import Any, Dict

from modelmap.enums import NameableType
from modelmap.properties import ValueReaderPropertyInfo, ValueWriterPropertyInfo
from modelmap.spi import ValueReader, ValueWriter


def resolve_accessors_from_value_reader(
  source: Any, config: Any, value_reader: ValueReader
) -> Dict[str, ValueReaderPropertyInfo]:
  """
  Resolves accessors for the members a reader reports for ``source``.

  Args:
      source: The structural source value.
      config: The active configuration.
      value_reader: Reader supporting the source's type.

  Returns:
      Dict[str, ValueReaderPropertyInfo]: Accessors in the reader's order.
  """
  accessors: Dict[str, ValueReaderPropertyInfo] = {}
  name_transformer = config.source_name_transformer
  for member_name in value_reader.member_names(source):
    member = value_reader.get_member(source, member_name)
    if member is not None:
      name = name_transformer.transform(member_name, NameableType.GENERIC)
      accessors[name] = ValueReaderPropertyInfo.from_member(member, member_name, name)
  return accessors


def resolve_mutators_from_value_writer(
  type_: type, config: Any, value_writer: ValueWriter
) -> Dict[str, ValueWriterPropertyInfo]:
  """
  Resolves mutators for the members a writer reports for ``type_``.

  The source name transformer is applied here as well, so that structural
  destinations are keyed the same way as structural sources.

  Args:
      type_: The destination type.
      config: The active configuration.
      value_writer: Writer supporting ``type_`` with member enumeration.

  Returns:
      Dict[str, ValueWriterPropertyInfo]: Mutators in the writer's order.
  """
  mutators: Dict[str, ValueWriterPropertyInfo] = {}
  name_transformer = config.source_name_transformer
  for member_name in value_writer.member_names(type_):
    member = value_writer.get_member(type_, member_name)
    if member is not None:
      name = name_transformer.transform(member_name, NameableType.GENERIC)
      mutators[name] = ValueWriterPropertyInfo.from_member(member, member_name, name)
  return mutators
