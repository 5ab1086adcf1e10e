"""
Tests for Configuration.

Verifies that:
1. Defaults are public access, NONE policies and field matching on.
2. Policy names are resolved; unknown access levels degrade to PUBLIC.
3. Configuration.load() picks up [tool.modelmap] and keyword overrides win.
4. Structural reader/writer lookup follows registration order.
"""

import pytest
from pydantic import ValidationError
from rich.console import Console

from modelmap.config import Configuration
from modelmap.conventions import NameTransformers, NamingConventions
from modelmap.enums import AccessLevel
from modelmap.utils.console import set_console
from modelmap.values import MappingReader, TypedDictWriter


@pytest.fixture
def toml_file(tmp_path):
  """Creates a dummy pyproject.toml in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.modelmap]
field_access_level = "protected"
method_access_level = "private"
source_naming_convention = "bean_accessor"
source_name_transformer = "bean_accessor"
field_matching_enabled = false
excluded_modules = ["sqlalchemy"]
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_defaults():
  config = Configuration()

  assert config.field_access_level is AccessLevel.PUBLIC
  assert config.method_access_level is AccessLevel.PUBLIC
  assert config.source_naming_convention is NamingConventions.NONE
  assert config.destination_name_transformer is NameTransformers.NONE
  assert config.field_matching_enabled is True


def test_policy_names_are_resolved():
  config = Configuration(destination_naming_convention="bean_mutator", destination_name_transformer="BEAN_MUTATOR")

  assert config.destination_naming_convention is NamingConventions.BEAN_MUTATOR
  assert config.destination_name_transformer is NameTransformers.BEAN_MUTATOR


def test_invalid_policies_are_rejected():
  with pytest.raises(ValidationError):
    Configuration(source_naming_convention="camel")
  with pytest.raises(ValidationError):
    Configuration(source_name_transformer=object())


def test_unknown_access_level_degrades_to_public():
  capture = Console(record=True, width=200)
  set_console(capture)

  config = Configuration(field_access_level="friends-only")

  assert config.field_access_level is AccessLevel.PUBLIC
  assert "friends-only" in capture.export_text()


def test_configuration_is_frozen():
  config = Configuration()
  with pytest.raises(ValidationError):
    config.field_matching_enabled = False


def test_copy_with_validates_changes():
  config = Configuration()
  relaxed = config.copy_with(field_access_level="private")

  assert relaxed.field_access_level is AccessLevel.PRIVATE
  assert config.field_access_level is AccessLevel.PUBLIC
  assert relaxed.value_access_store is config.value_access_store


def test_load_from_toml(tmp_path, toml_file):
  config = Configuration.load(search_path=tmp_path)

  assert config.field_access_level is AccessLevel.PROTECTED
  assert config.method_access_level is AccessLevel.PRIVATE
  assert config.source_naming_convention is NamingConventions.BEAN_ACCESSOR
  assert config.source_name_transformer is NameTransformers.BEAN_ACCESSOR
  assert config.field_matching_enabled is False
  assert "sqlalchemy" in config.type_exclusions.excluded_modules


def test_load_searches_parent_directories(tmp_path, toml_file):
  nested = tmp_path / "pkg" / "sub"
  nested.mkdir(parents=True)

  config = Configuration.load(search_path=nested)
  assert config.field_access_level is AccessLevel.PROTECTED


def test_overrides_win_over_toml(tmp_path, toml_file):
  config = Configuration.load(search_path=tmp_path, field_matching_enabled=True, method_access_level="public")

  assert config.field_matching_enabled is True
  assert config.method_access_level is AccessLevel.PUBLIC
  assert config.field_access_level is AccessLevel.PROTECTED


def test_load_without_tool_section(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
  config = Configuration.load(search_path=tmp_path)

  assert config.field_access_level is AccessLevel.PUBLIC


def test_invalid_toml_raises(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.modelmap\n", encoding="utf-8")
  with pytest.raises(ValueError, match="Invalid TOML") as excinfo:
    Configuration.load(search_path=tmp_path)

  assert isinstance(excinfo.value.__cause__, ValueError)


def test_structural_lookup():
  config = Configuration()

  assert isinstance(config.structural_reader_for(dict), MappingReader)
  assert config.structural_reader_for(int) is None

  from typing import TypedDict

  class Point(TypedDict):
    x: int

  assert isinstance(config.structural_writer_for(Point), TypedDictWriter)
  assert config.structural_writer_for(dict) is None
  assert config.structural_writer_for(list) is None
