"""
Structural Values Package.

Readers and writers for sources and destinations that expose named members
without static reflection, plus the stores the configuration looks them up in.

Modules:
    - ``readers``: Mapping and namespace readers.
    - ``writers``: TypedDict writer.
    - ``store``: Ordered reader/writer registries.
"""

from modelmap.values.readers import AttributeMember, KeyMember, MappingReader, NamespaceReader
from modelmap.values.store import ValueAccessStore, ValueMutateStore
from modelmap.values.writers import KeyWriterMember, TypedDictWriter

__all__ = [
  "AttributeMember",
  "KeyMember",
  "KeyWriterMember",
  "MappingReader",
  "NamespaceReader",
  "TypedDictWriter",
  "ValueAccessStore",
  "ValueMutateStore",
]
