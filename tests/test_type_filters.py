"""
Tests for Type Filters (value types, exclusions, ancestor chains).
"""

import datetime
import decimal
import enum
import pathlib
import uuid

import pydantic
import pytest

from modelmap.type_filters import TypeExclusions, ancestors, is_public_type, might_contain_properties


class Color(enum.Enum):
  RED = 1


class Base:
  pass


class Left(Base):
  pass


class Right(Base):
  pass


class Both(Left, Right):
  pass


class _Private:
  pass


@pytest.mark.parametrize(
  "type_",
  [str, bytes, int, bool, float, decimal.Decimal, datetime.datetime, datetime.date, uuid.UUID, pathlib.Path, type(None)],
)
def test_value_types_cannot_contain_properties(type_):
  assert not might_contain_properties(type_)


def test_user_classes_might_contain_properties():
  assert might_contain_properties(Base)
  assert might_contain_properties(Color)
  assert not might_contain_properties("Base")


def test_default_exclusions():
  exclusions = TypeExclusions()

  assert exclusions.is_internal(object)
  assert exclusions.is_internal(enum.Enum)
  assert exclusions.is_internal(dict)
  assert exclusions.is_internal(pydantic.BaseModel)
  assert not exclusions.is_internal(Base)
  assert not exclusions.is_internal(Color)


def test_extended_exclusions():
  exclusions = TypeExclusions().with_types(Base).with_modules(__name__)

  assert exclusions.is_internal(Base)
  assert exclusions.is_internal(Left)
  assert Base not in TypeExclusions().excluded_types


def test_submodules_are_covered():
  exclusions = TypeExclusions(excluded_types=(), excluded_modules=("pydantic",))
  assert exclusions.is_internal(pydantic.BaseModel)
  assert not exclusions.is_internal(object)


def test_ancestors_are_most_ancestral_first():
  assert ancestors(Both) == [Base, Right, Left]
  assert ancestors(Color) == []
  assert ancestors(Base) == []


def test_public_types():
  assert is_public_type(Base)
  assert not is_public_type(_Private)
