"""
Standard Naming Conventions and Name Transformers.

Conventions decide which raw member names qualify as properties; transformers
derive the logical name a property is looked up by. Both operate on the raw
member name, i.e. the declared name without its visibility underscores.

Bean-style policies recognise ``get_x``/``is_x`` accessors and ``set_x``
mutators. Fields always qualify under bean conventions.
"""

from typing import Dict, Tuple

from modelmap.enums import NameableType, PropertyType
from modelmap.spi import NameTransformer, NamingConvention


class _AnyName:
  """Accepts every name."""

  def __init__(self, name: str):
    self.name = name

  def applies(self, name: str, property_type: PropertyType) -> bool:
    return True

  def __repr__(self) -> str:
    return f"NamingConvention({self.name})"


class _PrefixedName:
  """Accepts fields, and methods whose name carries one of the prefixes."""

  def __init__(self, name: str, prefixes: Tuple[str, ...]):
    self.name = name
    self.prefixes = prefixes

  def applies(self, name: str, property_type: PropertyType) -> bool:
    if property_type is PropertyType.FIELD:
      return True
    return any(name.startswith(p) and len(name) > len(p) for p in self.prefixes)

  def __repr__(self) -> str:
    return f"NamingConvention({self.name})"


class _Identity:
  def __init__(self, name: str):
    self.name = name

  def transform(self, name: str, nameable_type: NameableType) -> str:
    return name

  def __repr__(self) -> str:
    return f"NameTransformer({self.name})"


class _PrefixStripper:
  """Strips the first matching prefix from method names."""

  def __init__(self, name: str, prefixes: Tuple[str, ...]):
    self.name = name
    self.prefixes = prefixes

  def transform(self, name: str, nameable_type: NameableType) -> str:
    if nameable_type is NameableType.METHOD:
      for prefix in self.prefixes:
        if name.startswith(prefix) and len(name) > len(prefix):
          return name[len(prefix) :]
    return name

  def __repr__(self) -> str:
    return f"NameTransformer({self.name})"


class NamingConventions:
  """Registry of the built-in naming conventions."""

  NONE: NamingConvention = _AnyName("none")
  BEAN_ACCESSOR: NamingConvention = _PrefixedName("bean_accessor", ("get_", "is_"))
  BEAN_MUTATOR: NamingConvention = _PrefixedName("bean_mutator", ("set_",))

  @classmethod
  def get(cls, name: str) -> NamingConvention:
    """
    Looks up a built-in convention by its registered name.

    Raises:
        ValueError: If no convention is registered under that name.
    """
    key = name.lower().strip()
    if key not in _CONVENTIONS:
      raise ValueError(f"Unknown naming convention: '{name}'. Supported: {sorted(_CONVENTIONS)}")
    return _CONVENTIONS[key]


class NameTransformers:
  """Registry of the built-in name transformers."""

  NONE: NameTransformer = _Identity("none")
  BEAN_ACCESSOR: NameTransformer = _PrefixStripper("bean_accessor", ("get_", "is_"))
  BEAN_MUTATOR: NameTransformer = _PrefixStripper("bean_mutator", ("set_",))

  @classmethod
  def get(cls, name: str) -> NameTransformer:
    """
    Looks up a built-in transformer by its registered name.

    Raises:
        ValueError: If no transformer is registered under that name.
    """
    key = name.lower().strip()
    if key not in _TRANSFORMERS:
      raise ValueError(f"Unknown name transformer: '{name}'. Supported: {sorted(_TRANSFORMERS)}")
    return _TRANSFORMERS[key]


_CONVENTIONS: Dict[str, NamingConvention] = {
  c.name: c for c in (NamingConventions.NONE, NamingConventions.BEAN_ACCESSOR, NamingConventions.BEAN_MUTATOR)
}
_TRANSFORMERS: Dict[str, NameTransformer] = {
  t.name: t for t in (NameTransformers.NONE, NameTransformers.BEAN_ACCESSOR, NameTransformers.BEAN_MUTATOR)
}
