"""
Discovery Package.

Finds the properties of classes and structural values that a mapping engine
can read from or write to.

Modules:
    - ``members``: Member enumeration and shape validation per member kind.
    - ``hierarchy``: Ancestor-chain walk with visibility, convention and naming policies.
    - ``structural``: Reader/writer based resolution for schemaless values.
    - ``resolver``: Facade choosing between the structural and reflective paths.
"""

from modelmap.discovery.hierarchy import ResolveRequest, can_access_member, resolve_properties, resolve_request
from modelmap.discovery.members import ACCESSORS, FIELDS, MUTATORS, WRITABLE_FIELDS, MemberResolver, RawMember, resolver_for
from modelmap.discovery.resolver import resolve_accessors, resolve_mutators
from modelmap.discovery.structural import resolve_accessors_from_value_reader, resolve_mutators_from_value_writer

__all__ = [
  "ACCESSORS",
  "FIELDS",
  "MUTATORS",
  "MemberResolver",
  "RawMember",
  "ResolveRequest",
  "WRITABLE_FIELDS",
  "can_access_member",
  "resolve_accessors",
  "resolve_accessors_from_value_reader",
  "resolve_mutators",
  "resolve_mutators_from_value_writer",
  "resolve_properties",
  "resolve_request",
  "resolver_for",
]
