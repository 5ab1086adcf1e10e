"""
Reader and Writer Stores.

Ordered registries of structural readers and writers. Lookup returns the first
registered entry that supports a type, so more specific entries must be added
before general ones.
"""

import logging
from typing import List, Optional

from modelmap.spi import ValueReader, ValueWriter
from modelmap.values.readers import MappingReader, NamespaceReader
from modelmap.values.writers import TypedDictWriter

logger = logging.getLogger(__name__)


class ValueAccessStore:
  """Registry of :class:`~modelmap.spi.ValueReader` implementations."""

  def __init__(self, readers: Optional[List[ValueReader]] = None):
    self._readers: List[ValueReader] = list(readers or [])

  @classmethod
  def default(cls) -> "ValueAccessStore":
    """Store holding the built-in mapping and namespace readers."""
    return cls([MappingReader(), NamespaceReader()])

  @property
  def readers(self) -> List[ValueReader]:
    return list(self._readers)

  def add_reader(self, reader: ValueReader, first: bool = False) -> None:
    """
    Registers a reader.

    Args:
        reader: The reader to register.
        first: If True, the reader takes precedence over existing entries.
    """
    if first:
      self._readers.insert(0, reader)
    else:
      self._readers.append(reader)
    logger.debug(f"Registered value reader {type(reader).__name__}")

  def get_first_supported_reader(self, type_: type) -> Optional[ValueReader]:
    for reader in self._readers:
      if reader.supports(type_):
        return reader
    return None


class ValueMutateStore:
  """Registry of :class:`~modelmap.spi.ValueWriter` implementations."""

  def __init__(self, writers: Optional[List[ValueWriter]] = None):
    self._writers: List[ValueWriter] = list(writers or [])

  @classmethod
  def default(cls) -> "ValueMutateStore":
    """Store holding the built-in TypedDict writer."""
    return cls([TypedDictWriter()])

  @property
  def writers(self) -> List[ValueWriter]:
    return list(self._writers)

  def add_writer(self, writer: ValueWriter, first: bool = False) -> None:
    """
    Registers a writer.

    Args:
        writer: The writer to register.
        first: If True, the writer takes precedence over existing entries.
    """
    if first:
      self._writers.insert(0, writer)
    else:
      self._writers.append(writer)
    logger.debug(f"Registered value writer {type(writer).__name__}")

  def get_first_supported_writer(self, type_: type) -> Optional[ValueWriter]:
    for writer in self._writers:
      if writer.supports(type_):
        return writer
    return None
