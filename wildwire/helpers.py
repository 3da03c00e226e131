"""
Definition Helpers

This module provides the small DSL used to declare entries in a definition
map. A helper is a recipe that becomes a Definition once the registry knows
the entry name it is stored under.

Example::

    registry = DefinitionRegistry({
        "db.host": "localhost",
        "app\\\\Database": create().constructor(get("db.host")),
        "app\\\\*Repository": create("app\\\\Sql*Repository"),
        "app\\\\Mailer": autowire().constructor_parameter("port", 25),
        "clock": factory(lambda: time.time()),
    })
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .definition import (
    AutowireDefinition,
    Definition,
    FactoryDefinition,
    MethodInjection,
    ObjectDefinition,
    Reference,
    ValueDefinition,
)
from .exceptions import InvalidDefinitionError


class DefinitionHelper(ABC):
    """Produces a Definition for the entry name it is stored under."""

    @abstractmethod
    def get_definition(self, entry_name: str) -> Definition:
        """Build the definition for ``entry_name``.

        Args:
            entry_name: Name the definition is being resolved for

        Returns:
            A new Definition. May be an AutowireDefinition; the registry
            hands those over to its autowiring collaborator.
        """
        ...


class CreateDefinitionHelper(DefinitionHelper):
    """Helper building an ObjectDefinition with explicit injections.

    Every configuration method returns the helper itself so calls can be
    chained::

        create("app\\\\SmtpMailer").constructor("smtp.local", 25).method("set_debug", True)

    Attributes:
        class_name: Class to instantiate, defaults to the entry name.
            May contain wildcards when declared under a wildcard key.
    """

    definition_class = ObjectDefinition

    def __init__(self, class_name: Optional[str] = None):
        self.class_name = class_name
        self._lazy = False
        self._constructor: Dict[Any, Any] = {}
        self._properties: Dict[str, Any] = {}
        self._methods: List[MethodInjection] = []

    def lazy(self) -> 'CreateDefinitionHelper':
        """Ask the consumer to defer construction until first use."""
        self._lazy = True
        return self

    def constructor(self, *args: Any, **kwargs: Any) -> 'CreateDefinitionHelper':
        """Set constructor arguments by position and/or by name.

        Calling this again replaces the previous arguments.
        """
        parameters: Dict[Any, Any] = dict(enumerate(args))
        parameters.update(kwargs)
        self._constructor = parameters
        return self

    def property(self, name: str, value: Any) -> 'CreateDefinitionHelper':
        """Set an attribute on the instance after construction."""
        self._properties[name] = value
        return self

    def method(self, name: str, *args: Any, **kwargs: Any) -> 'CreateDefinitionHelper':
        """Call a method on the instance after construction.

        The same method can be registered several times; calls happen in
        declaration order.
        """
        parameters: Dict[Any, Any] = dict(enumerate(args))
        parameters.update(kwargs)
        self._methods.append(MethodInjection(name, parameters))
        return self

    def get_definition(self, entry_name: str) -> ObjectDefinition:
        constructor_injection = None
        if self._constructor:
            constructor_injection = MethodInjection('__init__', dict(self._constructor))

        return self.definition_class(
            name=entry_name,
            class_name=self.class_name,
            constructor_injection=constructor_injection,
            property_injections=dict(self._properties),
            method_injections=[
                MethodInjection(m.method_name, dict(m.parameters)) for m in self._methods
            ],
            lazy=self._lazy,
        )


class AutowireDefinitionHelper(CreateDefinitionHelper):
    """Helper building an AutowireDefinition.

    Parameters not given here are guessed by the registry's autowiring
    collaborator (for ReflectionAutowiring, from type hints).
    """

    definition_class = AutowireDefinition

    def constructor_parameter(self, parameter: str, value: Any) -> 'AutowireDefinitionHelper':
        """Set a single constructor argument by name, leaving others to autowiring."""
        self._constructor[parameter] = value
        return self

    def method_parameter(self, method: str, parameter: str, value: Any) -> 'AutowireDefinitionHelper':
        """Set a single argument of a method call.

        Reuses the first call registered for ``method``, creating one when
        the method has not been registered yet.
        """
        for injection in self._methods:
            if injection.method_name == method:
                injection.parameters[parameter] = value
                return self

        self._methods.append(MethodInjection(method, {parameter: value}))
        return self


class FactoryDefinitionHelper(DefinitionHelper):
    """Helper building a FactoryDefinition with extra factory arguments."""

    def __init__(self, factory: Callable):
        if not callable(factory):
            raise InvalidDefinitionError(
                f"factory() expects a callable, got {type(factory).__name__}. "
                f"Use value() for literal values."
            )
        self.factory = factory
        self._parameters: Dict[str, Any] = {}

    def parameter(self, name: str, value: Any) -> 'FactoryDefinitionHelper':
        """Pass an extra keyword argument to the factory."""
        self._parameters[name] = value
        return self

    def get_definition(self, entry_name: str) -> FactoryDefinition:
        return FactoryDefinition(entry_name, self.factory, dict(self._parameters))


def create(class_name: Optional[str] = None) -> CreateDefinitionHelper:
    """Declare an object entry with explicit injections."""
    return CreateDefinitionHelper(class_name)


def autowire(class_name: Optional[str] = None) -> AutowireDefinitionHelper:
    """Declare an object entry whose constructor is inferred by autowiring."""
    return AutowireDefinitionHelper(class_name)


def factory(callable_: Callable) -> FactoryDefinitionHelper:
    """Declare an entry produced by calling ``callable_``."""
    return FactoryDefinitionHelper(callable_)


def value(raw: Any) -> ValueDefinition:
    """Declare a literal entry, even one that would otherwise be cast differently.

    Useful to store a function or a list as-is::

        {"handler": value(on_event)}  # not wrapped as a factory
    """
    return ValueDefinition('', raw)


def get(entry_name: str) -> Reference:
    """Declare a reference to another entry."""
    return Reference('', entry_name)
