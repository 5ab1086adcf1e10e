"""
Tests for the built-in Naming Conventions and Name Transformers.
"""

import pytest

from modelmap.conventions import NameTransformers, NamingConventions
from modelmap.enums import NameableType, PropertyType


def test_none_convention_accepts_everything():
  assert NamingConventions.NONE.applies("anything", PropertyType.METHOD)
  assert NamingConventions.NONE.applies("x", PropertyType.FIELD)


@pytest.mark.parametrize(
  "name, property_type, expected",
  [
    ("get_name", PropertyType.METHOD, True),
    ("is_active", PropertyType.METHOD, True),
    ("get_", PropertyType.METHOD, False),
    ("name", PropertyType.METHOD, False),
    ("name", PropertyType.FIELD, True),
    ("get_name", PropertyType.GENERIC, True),
  ],
)
def test_bean_accessor_convention(name, property_type, expected):
  assert NamingConventions.BEAN_ACCESSOR.applies(name, property_type) is expected


def test_bean_mutator_convention():
  assert NamingConventions.BEAN_MUTATOR.applies("set_name", PropertyType.METHOD)
  assert not NamingConventions.BEAN_MUTATOR.applies("get_name", PropertyType.METHOD)
  assert NamingConventions.BEAN_MUTATOR.applies("name", PropertyType.FIELD)


def test_bean_transformers_only_rename_methods():
  assert NameTransformers.BEAN_ACCESSOR.transform("get_name", NameableType.METHOD) == "name"
  assert NameTransformers.BEAN_ACCESSOR.transform("is_active", NameableType.METHOD) == "active"
  assert NameTransformers.BEAN_ACCESSOR.transform("get_name", NameableType.FIELD) == "get_name"
  assert NameTransformers.BEAN_MUTATOR.transform("set_name", NameableType.METHOD) == "name"
  assert NameTransformers.BEAN_MUTATOR.transform("set_", NameableType.METHOD) == "set_"
  assert NameTransformers.NONE.transform("get_name", NameableType.METHOD) == "get_name"


def test_lookup_by_name():
  assert NamingConventions.get("Bean_Accessor") is NamingConventions.BEAN_ACCESSOR
  assert NameTransformers.get("none") is NameTransformers.NONE

  with pytest.raises(ValueError, match="Unknown naming convention"):
    NamingConventions.get("camel")
  with pytest.raises(ValueError, match="Unknown name transformer"):
    NameTransformers.get("camel")
