import logging

# Public API
from .autowiring import Autowiring, NoAutowiring, ReflectionAutowiring, class_entry_name
from .constants import LOGGER_NAME, WILDCARD
from .definition import (
    ArrayDefinition,
    AutowireDefinition,
    Definition,
    FactoryDefinition,
    MethodInjection,
    ObjectDefinition,
    Reference,
    ValueDefinition,
)
from .exceptions import (
    AutowiringDisabledError,
    AutowiringError,
    InvalidDefinitionError,
    MalformedDefinitionError,
    WildwireError,
)
from .helpers import (
    AutowireDefinitionHelper,
    CreateDefinitionHelper,
    DefinitionHelper,
    FactoryDefinitionHelper,
    autowire,
    create,
    factory,
    get,
    value,
)
from .registry import DefinitionRegistry, replace_wildcards
from .source import DefinitionSource, MutableDefinitionSource, SourceChain

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "DefinitionRegistry",
    "replace_wildcards",
    "WILDCARD",
    # Sources
    "DefinitionSource",
    "MutableDefinitionSource",
    "SourceChain",
    # Definitions
    "Definition",
    "ValueDefinition",
    "FactoryDefinition",
    "ArrayDefinition",
    "ObjectDefinition",
    "AutowireDefinition",
    "Reference",
    "MethodInjection",
    # Helpers
    "DefinitionHelper",
    "CreateDefinitionHelper",
    "AutowireDefinitionHelper",
    "FactoryDefinitionHelper",
    "create",
    "autowire",
    "factory",
    "value",
    "get",
    # Autowiring
    "Autowiring",
    "NoAutowiring",
    "ReflectionAutowiring",
    "class_entry_name",
    # Exceptions
    "WildwireError",
    "MalformedDefinitionError",
    "InvalidDefinitionError",
    "AutowiringError",
    "AutowiringDisabledError",
]

# Version will be dynamically set by poetry-dynamic-versioning
try:
    from ._version import __version__
except ImportError:
    # Fallback for development
    __version__ = '0.0.0'
