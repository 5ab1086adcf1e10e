"""
Member Enumeration.

Lists the raw candidate members declared directly on one class, checks that a
candidate has the right shape for its kind, and builds the property record for
accepted candidates.

Three :class:`MemberResolver` variants exist, selected by
:class:`~modelmap.enums.MemberKind`:

*   ``FIELDS``: names from the class' own annotations and ``__slots__``.
    ``ClassVar`` and ``InitVar`` annotations are skipped as invalid.
    ``WRITABLE_FIELDS`` also rejects the fields of immutable classes.
*   ``ACCESSORS``: ``property`` objects with a getter, ``functools.cached_property``,
    and plain functions taking only ``self`` that do not return ``None``.
*   ``MUTATORS``: ``property`` objects with a setter, and plain functions taking
    ``self`` and exactly one value.

Member names follow Python visibility conventions. The *raw name* of a member
is its declared name without leading underscores; ``_x`` is protected and
``__x`` (stored mangled as ``_Owner__x``) is private.
"""

import dataclasses
import functools
import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from modelmap.enums import MemberKind, PropertyType, Visibility
from modelmap.handles import MemberHandle
from modelmap.properties import FieldPropertyInfo, MethodAccessor, MethodMutator, PropertyInfo
from modelmap.type_filters import is_public_type

_METHOD_OBJECTS = (property, functools.cached_property, types.FunctionType, staticmethod, classmethod)


@dataclass(frozen=True)
class RawMember:
  """
  A candidate member declared directly on a class.

  Attributes:
      name (str): Raw name, declared name without visibility underscores.
      attr_name (str): Storage name used for invocation.
      owner (type): Declaring class.
      kind (MemberKind): Which enumerator produced the member.
      visibility (Visibility): Derived from the declared name.
      obj (Any): The annotation (fields) or the class attribute (methods).
      handle (MemberHandle): Invocation binding.
  """

  name: str
  attr_name: str
  owner: type
  kind: MemberKind
  visibility: Visibility
  obj: Any
  handle: MemberHandle


def own_annotations(cls: type) -> Dict[str, Any]:
  """Annotations declared on ``cls`` itself, excluding inherited ones."""
  try:
    return dict(inspect.get_annotations(cls))
  except NameError:
    return dict(vars(cls).get("__annotations__", {}))


def parse_member_name(owner: type, attr_name: str) -> Optional[Tuple[str, Visibility, str]]:
  """
  Splits a declared or stored attribute name into its parts.

  Args:
      owner: The class the name is declared on.
      attr_name: The name as found in the class namespace or ``__slots__``.

  Returns:
      Optional[Tuple[str, Visibility, str]]: ``(raw_name, visibility, storage_name)``,
      or None for dunder names and names made only of underscores.
  """
  if attr_name.startswith("__") and attr_name.endswith("__"):
    return None

  mangle_prefix = f"_{owner.__name__.lstrip('_')}__"
  if attr_name.startswith(mangle_prefix):
    raw, visibility, storage = attr_name[len(mangle_prefix) :], Visibility.PRIVATE, attr_name
  elif attr_name.startswith("__"):
    # Unmangled private name, as written in __slots__
    raw, visibility = attr_name[2:], Visibility.PRIVATE
    storage = f"{mangle_prefix}{raw}" if owner.__name__.strip("_") else attr_name
  elif attr_name.startswith("_"):
    raw, visibility, storage = attr_name.lstrip("_"), Visibility.PROTECTED, attr_name
  else:
    raw, visibility, storage = attr_name, Visibility.PUBLIC, attr_name

  if not raw or raw.startswith("_"):
    return None
  return raw, visibility, storage


def _is_class_var(annotation: Any) -> bool:
  if isinstance(annotation, str):
    return annotation.split("[", 1)[0].strip() in ("ClassVar", "typing.ClassVar", "InitVar", "dataclasses.InitVar")
  if annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar:
    return True
  return isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar


def _slot_names(cls: type) -> List[str]:
  slots = vars(cls).get("__slots__", ())
  if isinstance(slots, str):
    return [slots]
  return list(slots)


def _positional_params(func: types.FunctionType) -> Optional[List[inspect.Parameter]]:
  try:
    params = list(inspect.signature(func).parameters.values())
  except (TypeError, ValueError):
    return None
  positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
  if any(p.kind not in positional for p in params):
    return None
  return params


def _return_annotation(func: Any) -> Any:
  if func is None:
    return None
  try:
    annotation = inspect.signature(func).return_annotation
  except (TypeError, ValueError):
    return None
  return None if annotation is inspect.Signature.empty else annotation


def _value_annotation(func: Any) -> Any:
  params = _positional_params(func) if func is not None else None
  if not params or len(params) != 2:
    return None
  annotation = params[1].annotation
  return None if annotation is inspect.Parameter.empty else annotation


class MemberResolver:
  """
  Enumerates, validates and wraps the members of one kind.

  Attributes:
      kind (MemberKind): The member kind this variant handles.
      writable (bool): Fields only. If True, fields of immutable classes are rejected.
  """

  def __init__(self, kind: MemberKind, writable: bool = False):
    self.kind = kind
    self.writable = writable

  def members_for(self, cls: type) -> List[RawMember]:
    """
    Lists the members of this kind declared directly on ``cls``.

    Args:
        cls: The class to enumerate.

    Returns:
        List[RawMember]: Candidates in declaration order.
    """
    if self.kind is MemberKind.FIELD:
      return self._fields_for(cls)
    return self._methods_for(cls)

  def is_valid(self, member: RawMember) -> bool:
    """Checks that a candidate has the shape required by this kind."""
    if self.kind is MemberKind.FIELD:
      if _is_class_var(member.obj) or isinstance(vars(member.owner).get(member.attr_name), _METHOD_OBJECTS):
        return False
      return not (self.writable and _is_immutable(member.owner))

    obj = member.obj
    if isinstance(obj, (staticmethod, classmethod)):
      return False

    if self.kind is MemberKind.ACCESSOR:
      if isinstance(obj, property):
        return obj.fget is not None
      if isinstance(obj, functools.cached_property):
        return True
      if inspect.iscoroutinefunction(obj):
        return False
      params = _positional_params(obj)
      return params is not None and len(params) == 1 and not _declares_none(obj)

    if member.owner is object:
      return False
    if isinstance(obj, property):
      return obj.fset is not None
    if isinstance(obj, functools.cached_property):
      return False
    params = _positional_params(obj)
    return params is not None and len(params) == 2

  def property_info_for(self, initial_type: type, member: RawMember, config: Any, name: str) -> PropertyInfo:
    """
    Builds the property record for an accepted member.

    Args:
        initial_type: The class resolution started from.
        member: The accepted member.
        config: The active configuration.
        name: The transformed logical name.

    Returns:
        PropertyInfo: A field record, a method accessor or a method mutator.
    """
    if self.kind is MemberKind.FIELD:
      return FieldPropertyInfo(
        name=name,
        initial_type=initial_type,
        declaring_type=member.owner,
        member=member.handle,
        property_type=PropertyType.FIELD,
        value_type=member.obj,
      )

    obj = member.obj
    if self.kind is MemberKind.ACCESSOR:
      if isinstance(obj, property):
        value_type = _return_annotation(obj.fget)
      elif isinstance(obj, functools.cached_property):
        value_type = _return_annotation(obj.func)
      else:
        value_type = _return_annotation(obj)
      return MethodAccessor(
        name=name,
        initial_type=initial_type,
        declaring_type=member.owner,
        member=member.handle,
        property_type=PropertyType.METHOD,
        value_type=value_type,
      )

    return MethodMutator(
      name=name,
      initial_type=initial_type,
      declaring_type=member.owner,
      member=member.handle,
      property_type=PropertyType.METHOD,
      value_type=_value_annotation(obj.fset if isinstance(obj, property) else obj),
    )

  def _fields_for(self, cls: type) -> List[RawMember]:
    members = []
    seen = set()
    annotated = [(name, annotation) for name, annotation in own_annotations(cls).items()]
    slotted = [(name, None) for name in _slot_names(cls)]
    for declared, annotation in annotated + slotted:
      parsed = parse_member_name(cls, declared)
      if parsed is None:
        continue
      raw, visibility, storage = parsed
      if storage in seen:
        continue
      seen.add(storage)
      members.append(self._raw_member(cls, raw, storage, visibility, annotation, callable_member=False))
    return members

  def _methods_for(self, cls: type) -> List[RawMember]:
    members = []
    for attr_name, obj in vars(cls).items():
      if not isinstance(obj, _METHOD_OBJECTS):
        continue
      parsed = parse_member_name(cls, attr_name)
      if parsed is None:
        continue
      raw, visibility, storage = parsed
      callable_member = isinstance(obj, types.FunctionType)
      members.append(self._raw_member(cls, raw, storage, visibility, obj, callable_member=callable_member))
    return members

  def _raw_member(
    self, cls: type, raw: str, storage: str, visibility: Visibility, obj: Any, callable_member: bool
  ) -> RawMember:
    public = visibility is Visibility.PUBLIC and is_public_type(cls)
    return RawMember(
      name=raw,
      attr_name=storage,
      owner=cls,
      kind=self.kind,
      visibility=visibility,
      obj=obj,
      handle=MemberHandle(cls, storage, public=public, callable_member=callable_member),
    )

  def __repr__(self) -> str:
    suffix = ", writable" if self.writable else ""
    return f"MemberResolver({self.kind.value}{suffix})"


def _is_immutable(cls: type) -> bool:
  # NamedTuple fields, frozen dataclasses and frozen pydantic models reject assignment
  if issubclass(cls, tuple):
    return True
  params = vars(cls).get("__dataclass_params__")
  if params is not None and params.frozen:
    return True
  model_config = getattr(cls, "model_config", None)
  return isinstance(model_config, dict) and bool(model_config.get("frozen"))


def _declares_none(func: Any) -> bool:
  try:
    annotation = inspect.signature(func).return_annotation
  except (TypeError, ValueError):
    return False
  return annotation is None or annotation == "None"


FIELDS = MemberResolver(MemberKind.FIELD)
WRITABLE_FIELDS = MemberResolver(MemberKind.FIELD, writable=True)
ACCESSORS = MemberResolver(MemberKind.ACCESSOR)
MUTATORS = MemberResolver(MemberKind.MUTATOR)

_BY_KIND = {MemberKind.FIELD: FIELDS, MemberKind.ACCESSOR: ACCESSORS, MemberKind.MUTATOR: MUTATORS}


def resolver_for(kind: MemberKind) -> MemberResolver:
  """Returns the enumerator variant for a member kind."""
  return _BY_KIND[kind]
