"""
Autowiring

This module provides the collaborator a registry delegates to when an entry
casts to an AutowireDefinition.

- Autowiring: the contract the registry depends on
- NoAutowiring: default collaborator, refuses every request
- ReflectionAutowiring: infers constructor arguments from type hints

Example::

    registry = DefinitionRegistry(
        {"app\\\\UserRepository": autowire()},
        autowiring=ReflectionAutowiring(),
    )
    definition = registry.get_definition("app\\\\UserRepository")
    # ObjectDefinition whose constructor injection references
    # "app\\\\Database" for a `db: Database` parameter
"""

import importlib
import inspect
import logging
import typing
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Type

from .constants import NAMESPACE_SEPARATOR
from .definition import (
    AutowireDefinition,
    Definition,
    MethodInjection,
    ObjectDefinition,
    Reference,
)
from .exceptions import AutowiringDisabledError, AutowiringError

logger = logging.getLogger(__name__)

ClassResolver = Callable[[str], Optional[Type]]


class Autowiring(ABC):
    """Turns autowire markers into object definitions."""

    @abstractmethod
    def autowire(self, name: str, definition: Optional[AutowireDefinition] = None) -> Optional[Definition]:
        """Build a definition for ``name``.

        Args:
            name: Entry name being resolved
            definition: Explicit configuration to complete, if any

        Returns:
            The completed definition, or None when the entry cannot be autowired
        """
        ...


class NoAutowiring(Autowiring):
    """Autowiring collaborator used when none is configured."""

    def autowire(self, name: str, definition: Optional[AutowireDefinition] = None) -> Optional[Definition]:
        raise AutowiringDisabledError(
            f"Cannot autowire entry '{name}' because autowiring is disabled. "
            f"Pass an autowiring collaborator to the registry or define the "
            f"entry with create()."
        )


def class_entry_name(cls: Type) -> str:
    """Entry name for a class: its module path and qualified name, namespace separated.

    Example::

        >>> class_entry_name(collections.OrderedDict)
        'collections\\\\OrderedDict'
    """
    return NAMESPACE_SEPARATOR.join(cls.__module__.split('.') + cls.__qualname__.split('.'))


def import_class(class_name: str) -> Optional[Type]:
    """Resolve a namespace separated class name by importing its module.

    Tries the longest importable module prefix first, then walks the
    remaining segments as attributes (for nested classes).

    Returns:
        The class, or None when no module/attribute combination matches
    """
    parts = [part for part in class_name.split(NAMESPACE_SEPARATOR) if part]
    for split in range(len(parts) - 1, 0, -1):
        module_name = '.'.join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError:
            continue

        for attribute in parts[split:]:
            target = getattr(target, attribute, None)
            if target is None:
                break

        if inspect.isclass(target):
            return target

    return None


class ReflectionAutowiring(Autowiring):
    """Autowiring based on constructor signatures and type hints.

    Explicit constructor parameters from the autowire definition are kept;
    every other parameter of ``__init__`` is filled with a Reference to the
    entry named after its annotated class. Parameters with a default value
    are left to the default.

    Attributes:
        class_resolver: Maps a class name to a class. Defaults to
            ``import_class``.
    """

    def __init__(self, class_resolver: Optional[ClassResolver] = None):
        self.class_resolver: ClassResolver = class_resolver or import_class

    def autowire(self, name: str, definition: Optional[AutowireDefinition] = None) -> Optional[Definition]:
        class_name = definition.class_name if definition is not None else name
        cls = self.class_resolver(class_name)
        if cls is None:
            raise AutowiringError(
                f"Cannot autowire entry '{name}': class '{class_name}' could not be found. "
                f"Check the class name or pass a class_resolver that knows it."
            )

        explicit = MethodInjection('__init__')
        if definition is not None and definition.constructor_injection is not None:
            explicit = MethodInjection('__init__', dict(definition.constructor_injection.parameters))

        guessed = self._guess_constructor_parameters(name, cls, explicit)
        explicit.merge(guessed)
        logger.debug("Autowired '%s' as %s with parameters %s", name, cls.__qualname__, list(explicit.parameters))

        return ObjectDefinition(
            name=name,
            class_name=class_name,
            constructor_injection=explicit if explicit.parameters else None,
            property_injections=dict(definition.property_injections) if definition else {},
            method_injections=list(definition.method_injections) if definition else [],
            lazy=definition.lazy if definition else False,
        )

    def _guess_constructor_parameters(
        self,
        name: str,
        cls: Type,
        explicit: MethodInjection
    ) -> MethodInjection:
        """Build references for constructor parameters not given explicitly.

        Raises:
            AutowiringError: When a required parameter has no usable class annotation
        """
        guessed = MethodInjection('__init__')
        if cls.__init__ is object.__init__:
            return guessed

        try:
            sig = inspect.signature(cls.__init__)
        except (ValueError, TypeError) as e:
            raise AutowiringError(
                f"Cannot autowire entry '{name}': {cls.__name__}.__init__ "
                f"cannot be inspected: {e}."
            ) from e

        hints = self._resolve_type_hints(cls)
        positional = 0
        for param_name, param in sig.parameters.items():
            if param_name == 'self':
                continue

            # Skip *args and **kwargs
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            index = positional
            if param.kind != inspect.Parameter.KEYWORD_ONLY:
                positional += 1

            if param_name in explicit.parameters or index in explicit.parameters:
                continue

            if param.default is not inspect.Parameter.empty:
                continue

            annotation = hints.get(param_name, param.annotation)
            if (
                annotation is not inspect.Parameter.empty
                and inspect.isclass(annotation)
                and annotation.__module__ != 'builtins'
            ):
                guessed.parameters[param_name] = Reference('', class_entry_name(annotation))
                continue

            raise AutowiringError(
                f"Cannot autowire entry '{name}': parameter '{param_name}' of "
                f"{cls.__name__}.__init__ has no value defined or guessable. "
                f"Annotate it with a class or define it explicitly."
            )

        return guessed

    @staticmethod
    def _resolve_type_hints(cls: Type) -> Dict[str, Any]:
        """Resolve type hints of ``cls.__init__``, empty on failure.

        Unresolvable forward references fall back to the raw annotations,
        which are then rejected as non-class annotations.
        """
        try:
            return typing.get_type_hints(cls.__init__)
        except (NameError, TypeError, RecursionError):
            return {}
