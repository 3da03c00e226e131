"""
Definition

Data classes describing how a value is produced for an entry name.

A registry stores raw entries; casting turns each of them into one of these
definitions. The consuming resolver dispatches on the definition's class:

- ValueDefinition: return the wrapped value as-is
- FactoryDefinition: call the wrapped callable
- ObjectDefinition: instantiate ``class_name`` with the injection metadata
- ArrayDefinition: resolve each nested raw entry
- Reference: resolve another entry
- AutowireDefinition: marker replaced by the autowiring collaborator
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Union

# Constructor/method parameters are keyed by position or by name
ParameterKey = Union[int, str]


@dataclass
class Definition:
    """Base class of all definitions"""
    name: str


@dataclass
class ValueDefinition(Definition):
    """Definition of a literal value"""
    value: Any = None


@dataclass
class FactoryDefinition(Definition):
    """Definition of a value produced by calling ``factory``"""
    factory: Optional[Callable] = None
    parameters: Dict[str, Any] = field(default_factory=dict)  # Extra arguments for the factory


@dataclass
class ArrayDefinition(Definition):
    """Definition of a container whose items are raw entries"""
    values: Union[list, tuple, dict] = field(default_factory=list)


@dataclass
class Reference(Definition):
    """Definition that points at another entry"""
    target_name: str = ""


@dataclass
class MethodInjection:
    """Arguments to pass to a method (or to ``__init__``)"""
    method_name: str
    parameters: Dict[ParameterKey, Any] = field(default_factory=dict)

    def merge(self, other: 'MethodInjection') -> None:
        """Fill in the parameters ``self`` does not define from ``other``.

        Parameters already present in ``self`` are kept.

        Args:
            other: Injection whose parameters act as fallbacks
        """
        for key, value in other.parameters.items():
            self.parameters.setdefault(key, value)

    def copy(self) -> 'MethodInjection':
        """Return an injection with its own parameter dict."""
        return MethodInjection(self.method_name, dict(self.parameters))


@dataclass
class ObjectDefinition(Definition):
    """Definition of an instance of ``class_name``.

    Attributes:
        name: Entry name this definition was resolved for
        class_name: Class to instantiate, defaults to ``name``. Mutable, since
            wildcard lookups substitute captured segments into it.
        constructor_injection: Arguments for ``__init__``
        property_injections: Attribute name -> raw entry, set after construction
        method_injections: Methods to call after construction, in order
        lazy: Whether the consumer should defer construction
    """
    class_name: Optional[str] = None
    constructor_injection: Optional[MethodInjection] = None
    property_injections: Dict[str, Any] = field(default_factory=dict)
    method_injections: List[MethodInjection] = field(default_factory=list)
    lazy: bool = False

    def __post_init__(self):
        if self.class_name is None:
            self.class_name = self.name

    def copy(self) -> 'ObjectDefinition':
        """Return a copy that shares no injection container with ``self``."""
        return replace(
            self,
            constructor_injection=self.constructor_injection.copy() if self.constructor_injection else None,
            property_injections=dict(self.property_injections),
            method_injections=[m.copy() for m in self.method_injections],
        )


@dataclass
class AutowireDefinition(ObjectDefinition):
    """Object definition whose missing details are inferred by autowiring"""
    pass
