"""
Resolution Configuration.

The :class:`Configuration` bundle is read-only during a resolve call. It
supplies the visibility levels, naming conventions and name transformers for
both sides of a mapping, the field-matching switch, the type exclusion policy,
and the stores of structural readers and writers.

Settings can be persisted in ``pyproject.toml``:

.. code-block:: toml

    [tool.modelmap]
    field_access_level = "protected"
    method_access_level = "public"
    source_naming_convention = "bean_accessor"
    source_name_transformer = "bean_accessor"
    field_matching_enabled = true
    excluded_modules = ["sqlalchemy"]
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modelmap.conventions import NameTransformers, NamingConventions
from modelmap.enums import AccessLevel
from modelmap.spi import ValueReader, ValueWriter
from modelmap.type_filters import TypeExclusions
from modelmap.utils.console import log_info, log_warning
from modelmap.values.store import ValueAccessStore, ValueMutateStore

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore


class Configuration(BaseModel):
  """
  Configuration bundle consumed by property resolution.
  """

  model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

  field_access_level: AccessLevel = Field(AccessLevel.PUBLIC, description="Most relaxed visibility admitted for fields.")
  method_access_level: AccessLevel = Field(AccessLevel.PUBLIC, description="Most relaxed visibility admitted for methods.")

  source_naming_convention: Any = Field(default_factory=lambda: NamingConventions.NONE, description="Convention for accessor names.")
  destination_naming_convention: Any = Field(default_factory=lambda: NamingConventions.NONE, description="Convention for mutator names.")
  source_name_transformer: Any = Field(default_factory=lambda: NameTransformers.NONE, description="Transformer for accessor names.")
  destination_name_transformer: Any = Field(default_factory=lambda: NameTransformers.NONE, description="Transformer for mutator names.")

  field_matching_enabled: bool = Field(True, description="If True, fields are resolved alongside methods.")
  type_exclusions: TypeExclusions = Field(default_factory=TypeExclusions)
  value_access_store: ValueAccessStore = Field(default_factory=ValueAccessStore.default)
  value_mutate_store: ValueMutateStore = Field(default_factory=ValueMutateStore.default)

  @field_validator("field_access_level", "method_access_level", mode="before")
  @classmethod
  def validate_access_level(cls, v: Any) -> AccessLevel:
    """
    Normalizes an access level, degrading unknown values to PUBLIC.

    Args:
        v (Any): An AccessLevel or its string value.

    Returns:
        AccessLevel: The parsed level, or PUBLIC if unrecognized.
    """
    if isinstance(v, AccessLevel):
      return v
    try:
      return AccessLevel(str(v).lower().strip())
    except ValueError:
      log_warning(f"Unknown access level '{v}', falling back to 'public'")
      return AccessLevel.PUBLIC

  @field_validator("source_naming_convention", "destination_naming_convention", mode="before")
  @classmethod
  def validate_naming_convention(cls, v: Any) -> Any:
    if isinstance(v, str):
      return NamingConventions.get(v)
    if not callable(getattr(v, "applies", None)):
      raise ValueError(f"Naming convention must define applies(name, property_type), got {v!r}")
    return v

  @field_validator("source_name_transformer", "destination_name_transformer", mode="before")
  @classmethod
  def validate_name_transformer(cls, v: Any) -> Any:
    if isinstance(v, str):
      return NameTransformers.get(v)
    if not callable(getattr(v, "transform", None)):
      raise ValueError(f"Name transformer must define transform(name, nameable_type), got {v!r}")
    return v

  def structural_reader_for(self, type_: type) -> Optional[ValueReader]:
    """First registered reader supporting ``type_``, if any."""
    return self.value_access_store.get_first_supported_reader(type_)

  def structural_writer_for(self, type_: type) -> Optional[ValueWriter]:
    """First registered writer supporting ``type_``, if any."""
    return self.value_mutate_store.get_first_supported_writer(type_)

  def copy_with(self, **changes: Any) -> "Configuration":
    """
    Returns a validated copy with some settings replaced.

    Args:
        **changes: Field values to replace.

    Returns:
        Configuration: The new configuration.
    """
    data = {name: getattr(self, name) for name in type(self).model_fields}
    data.update(changes)
    return type(self)(**data)

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "Configuration":
    """
    Loads configuration from pyproject.toml and applies keyword overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        **overrides: Explicit settings; these win over TOML values.

    Returns:
        Configuration: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)
    if toml_dir:
      log_info(f"Loaded modelmap settings from [name]{toml_dir / 'pyproject.toml'}[/name]")

    settings: Dict[str, Any] = {}
    for key in (
      "field_access_level",
      "method_access_level",
      "source_naming_convention",
      "destination_naming_convention",
      "source_name_transformer",
      "destination_name_transformer",
      "field_matching_enabled",
    ):
      if key in toml_config:
        settings[key] = toml_config[key]

    extra_modules = toml_config.get("excluded_modules", [])
    if extra_modules and "type_exclusions" not in overrides:
      settings["type_exclusions"] = TypeExclusions().with_modules(*extra_modules)

    settings.update(overrides)
    return cls(**settings)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      with open(toml_path, "rb") as f:
        try:
          data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
          raise ValueError(f"Invalid TOML in {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      if "modelmap" in tool_section:
        return tool_section["modelmap"], parent
      return {}, None

  return {}, None
