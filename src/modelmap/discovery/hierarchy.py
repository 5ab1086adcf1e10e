"""
Hierarchy Property Resolution.

Resolves the properties of a class by walking its ancestor chain from the most
ancestral class down to the class itself. Each level contributes the members
it declares that pass three filters:

1.  The configured access level admits the member's visibility.
2.  The Member Enumerator confirms the member has the right shape.
3.  The naming convention accepts the member's raw name.

Accepted members are named by the name transformer and inserted into the
result, overwriting any same-named entry inherited from an ancestor. Entries
keep the position of their first insertion, so untouched inherited names stay
in ancestor order. A member that fails the filters still removes the inherited
entries bound to its attribute.

Excluded classes contribute nothing, and neither do ancestors reachable only
through them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Set

from modelmap.discovery.members import ACCESSORS, FIELDS, MUTATORS, WRITABLE_FIELDS, MemberResolver, RawMember
from modelmap.enums import AccessLevel, NameableType, PropertyType, Visibility
from modelmap.properties import PropertyInfo
from modelmap.spi import NameTransformer, NamingConvention
from modelmap.type_filters import TypeExclusions, ancestors, might_contain_properties

logger = logging.getLogger(__name__)

_ADMITTED: Dict[AccessLevel, frozenset] = {
  AccessLevel.PUBLIC: frozenset({Visibility.PUBLIC}),
  AccessLevel.PROTECTED: frozenset({Visibility.PUBLIC, Visibility.PROTECTED}),
  AccessLevel.PACKAGE_PRIVATE: frozenset({Visibility.PUBLIC, Visibility.PROTECTED}),
  AccessLevel.PRIVATE: frozenset({Visibility.PUBLIC, Visibility.PROTECTED, Visibility.PRIVATE}),
}


@dataclass(frozen=True)
class ResolveRequest:
  """
  Per-call resolution settings, shared unchanged by every level of the walk.

  Attributes:
      member_resolver (MemberResolver): Enumerator for the member kind.
      property_type (PropertyType): FIELD for the field pass, METHOD otherwise.
      config (Any): The active configuration.
      access_level (AccessLevel): Visibility policy for the member kind.
      naming_convention (NamingConvention): Role-specific convention.
      name_transformer (NameTransformer): Role-specific transformer.
  """

  member_resolver: MemberResolver
  property_type: PropertyType
  config: Any
  access_level: Any
  naming_convention: NamingConvention
  name_transformer: NameTransformer


def can_access_member(member: RawMember, access_level: Any) -> bool:
  """
  Checks a member's visibility against an access level.

  Levels relax monotonically: PUBLIC admits public members, PROTECTED also
  admits protected ones, PACKAGE_PRIVATE admits everything except strictly
  private members and PRIVATE admits all. An unrecognized level behaves as PUBLIC.

  Args:
      member: The candidate member.
      access_level: The configured level.

  Returns:
      bool: True if the member is admitted.
  """
  return member.visibility in _ADMITTED[_known_access_level(access_level)]


def _known_access_level(access_level: Any) -> AccessLevel:
  if access_level in _ADMITTED:
    return AccessLevel(access_level)
  logger.warning(f"Unknown access level {access_level!r}; treating as public")
  return AccessLevel.PUBLIC


def resolve_request(config: Any, access: bool, field: bool) -> ResolveRequest:
  """
  Builds the request for one top-level pass.

  Args:
      config: The active configuration.
      access: True for accessors (source side), False for mutators.
      field: True for the field pass, False for the method pass.

  Returns:
      ResolveRequest: The request shared by the whole walk.
  """
  if access:
    naming_convention = config.source_naming_convention
    name_transformer = config.source_name_transformer
  else:
    naming_convention = config.destination_naming_convention
    name_transformer = config.destination_name_transformer

  if field:
    return ResolveRequest(
      member_resolver=FIELDS if access else WRITABLE_FIELDS,
      property_type=PropertyType.FIELD,
      config=config,
      access_level=_known_access_level(config.field_access_level),
      naming_convention=naming_convention,
      name_transformer=name_transformer,
    )
  return ResolveRequest(
    member_resolver=ACCESSORS if access else MUTATORS,
    property_type=PropertyType.METHOD,
    config=config,
    access_level=_known_access_level(config.method_access_level),
    naming_convention=naming_convention,
    name_transformer=name_transformer,
  )


def resolve_properties(initial_type: type, request: ResolveRequest) -> Dict[str, PropertyInfo]:
  """
  Resolves the properties of ``initial_type`` for one member kind.

  Ancestors reachable only through an excluded class are pruned together with
  that class.

  Args:
      initial_type: The class to resolve.
      request: Settings for this pass.

  Returns:
      Dict[str, PropertyInfo]: Properties keyed by logical name, ancestors first.

  Raises:
      MemberAccessError: If an accepted non-public member cannot be unlocked.
  """
  exclusions = request.config.type_exclusions
  if not _is_candidate(initial_type, exclusions):
    logger.debug(f"Skipping {initial_type!r}: cannot contain properties")
    return {}

  reachable = _reachable_ancestors(initial_type, exclusions)
  properties: Dict[str, PropertyInfo] = {}
  for ancestor in ancestors(initial_type):
    if ancestor in reachable:
      _resolve_declared(initial_type, ancestor, request, properties)
  _resolve_declared(initial_type, initial_type, request, properties)
  return properties


def _is_candidate(type_: type, exclusions: TypeExclusions) -> bool:
  return might_contain_properties(type_) and not exclusions.is_internal(type_)


def _reachable_ancestors(initial_type: type, exclusions: TypeExclusions) -> Set[type]:
  """Ancestors linked to ``initial_type`` by a chain of candidate classes."""
  reachable: Set[type] = set()
  pending = list(initial_type.__bases__)
  while pending:
    base = pending.pop()
    if base in reachable or not _is_candidate(base, exclusions):
      continue
    reachable.add(base)
    pending.extend(base.__bases__)
  return reachable


def _resolve_declared(initial_type: type, type_: type, request: ResolveRequest, properties: Dict[str, PropertyInfo]) -> None:
  """
  Merges the properties declared directly on one level of the hierarchy.

  A rejected member still overrides inherited entries bound to the same
  attribute, since instances of ``type_`` no longer reach the ancestor's
  definition.
  """
  member_resolver = request.member_resolver
  nameable_type = NameableType.FIELD if request.property_type is PropertyType.FIELD else NameableType.METHOD

  for member in member_resolver.members_for(type_):
    if not (
      can_access_member(member, request.access_level)
      and member_resolver.is_valid(member)
      and request.naming_convention.applies(member.name, request.property_type)
    ):
      _drop_overridden(properties, member)
      continue

    name = request.name_transformer.transform(member.name, nameable_type)
    properties[name] = member_resolver.property_info_for(initial_type, member, request.config, name)

    if not member.handle.accessible:
      member.handle.unlock()
      logger.debug(f"Unlocked non-public member {type_.__qualname__}.{member.attr_name}")


def _drop_overridden(properties: Dict[str, PropertyInfo], member: RawMember) -> None:
  for name, info in list(properties.items()):
    if info.member.attr_name == member.attr_name:
      logger.debug(f"Dropping {name!r}: overridden by {member.owner.__qualname__}.{member.attr_name}")
      del properties[name]
