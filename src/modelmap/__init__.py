"""
modelmap Package.

Property discovery for object mapping. Given a class, or a structural value
such as a decoded JSON document, modelmap produces a name-keyed table of the
properties a mapping engine can read (accessors) or write (mutators).

Usage
-----

.. code-block:: python

    from dataclasses import dataclass
    import modelmap

    @dataclass
    class User:
        name: str
        _email: str

    modelmap.resolve_accessors(None, User)
    # {'name': FieldPropertyInfo(name='name', ...)}

    config = modelmap.Configuration(field_access_level="protected")
    list(modelmap.resolve_mutators(User, config))
    # ['name', 'email']

    modelmap.resolve_accessors({"id": 1, "tags": []})
    # {'id': ValueReaderPropertyInfo(...), 'tags': ValueReaderPropertyInfo(...)}
"""

from modelmap.config import Configuration
from modelmap.conventions import NameTransformers, NamingConventions
from modelmap.discovery.resolver import resolve_accessors, resolve_mutators
from modelmap.enums import AccessLevel, NameableType, PropertyType
from modelmap.handles import MemberAccessError
from modelmap.properties import Accessor, Mutator, PropertyInfo
from modelmap.type_filters import TypeExclusions

__version__ = "0.1.0"

__all__ = [
  "AccessLevel",
  "Accessor",
  "Configuration",
  "MemberAccessError",
  "Mutator",
  "NameTransformers",
  "NameableType",
  "NamingConventions",
  "PropertyInfo",
  "PropertyType",
  "TypeExclusions",
  "resolve_accessors",
  "resolve_mutators",
]
