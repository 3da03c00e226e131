"""
DefinitionRegistry

This module provides the in-memory definition source at the heart of
wildwire. It maps entry names to raw entries and answers lookups with
normalized definitions:

- Exact-name lookups, which never consult wildcard keys
- Wildcard keys (``"app\\\\*Interface"``) matched in declaration order
- Captured wildcard segments substituted into object class names
- Casting of raw entries (literals, containers, callables, helpers)
- Delegation of autowire markers to an autowiring collaborator

Example::

    registry = DefinitionRegistry({
        "db.host": "localhost",
        "app\\\\*RepositoryInterface": create("app\\\\Sql*Repository"),
    })

    registry.get_definition("db.host")
    # ValueDefinition(name='db.host', value='localhost')

    registry.get_definition("app\\\\UserRepositoryInterface").class_name
    # 'app\\\\SqlUserRepository'

The registry is not thread-safe; serialize mutations externally.
"""

import copy
import inspect
import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from .autowiring import Autowiring, NoAutowiring
from .constants import WILDCARD, WILDCARD_PATTERN
from .definition import (
    ArrayDefinition,
    AutowireDefinition,
    Definition,
    FactoryDefinition,
    ObjectDefinition,
    ValueDefinition,
)
from .exceptions import InvalidDefinitionError, MalformedDefinitionError
from .helpers import DefinitionHelper
from .source import MutableDefinitionSource

logger = logging.getLogger(__name__)


def replace_wildcards(template: str, replacements: Iterable[str]) -> str:
    """Replace wildcards in ``template`` with ``replacements``, left to right.

    Each replacement consumes the next wildcard located after the text
    substituted so far. Extra replacements are ignored; wildcards without a
    replacement are left untouched.

    Example::

        >>> replace_wildcards("app\\\\*\\\\*Impl", ["Mail", "Smtp"])
        'app\\\\Mail\\\\SmtpImpl'
    """
    position = 0
    for replacement in replacements:
        index = template.find(WILDCARD, position)
        if index == -1:
            break
        template = template[:index] + replacement + template[index + len(WILDCARD):]
        position = index + len(replacement)
    return template


def _is_wildcard(key: Any) -> bool:
    return isinstance(key, str) and WILDCARD in key


def _wildcard_regex(key: str) -> 're.Pattern[str]':
    """Compile a wildcard key into a regex matching whole entry names."""
    escaped = re.escape(key).replace(re.escape(WILDCARD), WILDCARD_PATTERN)
    return re.compile(escaped)


def _indexed_by_name(definitions: Any) -> Dict[Any, Any]:
    """Check that ``definitions`` maps names to entries and return it as a dict.

    Raises:
        MalformedDefinitionError: When ``definitions`` looks like a list
    """
    if isinstance(definitions, (list, tuple)):
        if len(definitions) > 0:
            raise MalformedDefinitionError(
                "The definition map is a list; definitions must be indexed by entry name."
            )
        return {}

    if not isinstance(definitions, Mapping):
        raise MalformedDefinitionError(
            f"The definition map must be a mapping of entry names, "
            f"got {type(definitions).__name__}."
        )

    for index in (0, '0'):
        if definitions.get(index) is not None:
            raise MalformedDefinitionError(
                "The definition map is not indexed by entry name in the definition "
                "array: it has an entry at position 0. Did you pass a list?"
            )

    return dict(definitions)


class DefinitionRegistry(MutableDefinitionSource):
    """Definition source reading from an in-memory map.

    Attributes:
        autowiring: Collaborator completing AutowireDefinitions
        _definitions: Entry name -> raw entry, in declaration order
        _wildcard_definitions: Subset of ``_definitions`` whose key contains a
            wildcard. None until the first wildcard lookup, reset to None on
            every mutation.
    """

    def __init__(
        self,
        definitions: Optional[Mapping] = None,
        autowiring: Optional[Autowiring] = None
    ):
        """Initialize the registry.

        Args:
            definitions: Entry name -> raw entry
            autowiring: Collaborator for autowire entries. Defaults to
                NoAutowiring, which refuses to autowire.

        Raises:
            MalformedDefinitionError: When ``definitions`` is not indexed by name
        """
        self._definitions: Dict[str, Any] = _indexed_by_name(definitions if definitions is not None else {})
        self._wildcard_definitions: Optional[Dict[str, Any]] = None
        self.autowiring: Autowiring = autowiring or NoAutowiring()

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def add_definitions(self, definitions: Mapping) -> None:
        """Merge raw entries into the registry.

        Newly added entries prevail over existing ones with the same name.
        They also come first in declaration order, so new wildcard keys are
        tried before older ones.

        Args:
            definitions: Entry name -> raw entry

        Raises:
            MalformedDefinitionError: When ``definitions`` is not indexed by
                name. The registry is left unchanged.
        """
        merged = _indexed_by_name(definitions)
        for name, raw in self._definitions.items():
            merged.setdefault(name, raw)
        self._definitions = merged

        self._wildcard_definitions = None

    def add_definition(self, definition: Definition) -> None:
        """Store a single definition under its name, replacing any previous entry.

        Raises:
            InvalidDefinitionError: When ``definition`` is not a Definition
        """
        if not isinstance(definition, Definition):
            raise InvalidDefinitionError(
                f"add_definition() expects a Definition, got {type(definition).__name__}. "
                f"Use add_definitions() for raw entries."
            )
        self._definitions[definition.name] = definition

        self._wildcard_definitions = None

    def get_definition(self, name: str) -> Optional[Definition]:
        """Look up the definition for ``name``.

        Exact names are tried first. Otherwise wildcard keys are tried in
        declaration order and the first one matching the whole name wins.
        For an ObjectDefinition, the captured segments replace the wildcards
        of its class name.

        Args:
            name: Entry name to look up

        Returns:
            The definition, or None when no key matches
        """
        if name in self._definitions:
            return self.cast_definition(self._definitions[name], name)

        for key, raw in self._get_wildcard_definitions().items():
            match = _wildcard_regex(key).fullmatch(name)
            if match is None:
                continue

            definition = self.cast_definition(raw, name)
            logger.debug("Entry '%s' matched wildcard key '%s'", name, key)

            # For a class definition, replace * in the class name with the matches
            # *Interface -> *Impl => FooInterface -> FooImpl
            if isinstance(definition, ObjectDefinition):
                definition = definition.copy()
                definition.class_name = replace_wildcards(definition.class_name, match.groups())

            return definition

        return None

    def get_definitions(self) -> Dict[str, Definition]:
        """Return definitions for every non-wildcard entry, keyed by entry name."""
        return {
            name: self.cast_definition(raw, name)
            for name, raw in self._definitions.items()
            if not _is_wildcard(name)
        }

    def cast_definition(self, definition: Any, name: str) -> Definition:
        """Normalize a raw entry into a Definition for ``name``.

        Dispatch order: helper, container, callable, anything not yet a
        Definition. An AutowireDefinition, whatever branch produced it, is
        then replaced by the autowiring collaborator's result. Never fails
        on the entry's shape; autowiring errors propagate as-is.

        Args:
            definition: Raw entry
            name: Entry name the definition is resolved for

        Returns:
            The normalized definition
        """
        if isinstance(definition, DefinitionHelper):
            definition = definition.get_definition(name)
        elif isinstance(definition, (list, tuple, dict)):
            definition = ArrayDefinition(name, definition)
        elif callable(definition) and not inspect.isclass(definition):
            definition = FactoryDefinition(name, definition)
        elif not isinstance(definition, Definition):
            definition = ValueDefinition(name, definition)

        if not definition.name:
            # Built by value()/get() outside the registry
            definition = copy.copy(definition)
            definition.name = name

        if isinstance(definition, AutowireDefinition):
            logger.debug("Delegating entry '%s' to %s", name, type(self.autowiring).__name__)
            definition = self.autowiring.autowire(name, definition)

        return definition

    def _get_wildcard_definitions(self) -> Dict[str, Any]:
        """Return wildcard entries, building the cache when it is unbuilt."""
        if self._wildcard_definitions is None:
            self._wildcard_definitions = {
                key: raw for key, raw in self._definitions.items() if _is_wildcard(key)
            }
            logger.debug("Built wildcard cache with %d key(s)", len(self._wildcard_definitions))
        return self._wildcard_definitions
