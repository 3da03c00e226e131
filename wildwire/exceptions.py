"""
Wildwire Exceptions

Custom exception hierarchy for the wildwire definition registry
"""


class WildwireError(Exception):
    """
    Base exception for all wildwire errors.

    All wildwire-specific exceptions inherit from this class.
    You can catch this to handle any registry error generically.

    Example:
        >>> try:
        ...     registry.add_definitions(["oops"])
        ... except WildwireError as e:
        ...     print(f"Registry error: {e}")
    """

    pass


class MalformedDefinitionError(WildwireError):
    """
    Raised when a definition map is not indexed by entry names.

    This error occurs when ``DefinitionRegistry(...)`` or
    ``add_definitions(...)`` receives something that looks like a plain
    list instead of a name -> entry mapping. The check happens before the
    registry is touched, so existing entries survive the failed call.

    Common causes:
        - Passing a list of definitions instead of a dict
        - Building the map with positional keys (``{0: ..., 1: ...}``)
        - Naming an entry ``"0"``

    Solution:
        Key every entry by the name it will be requested with::

            # Good
            registry = DefinitionRegistry({"db.host": "localhost"})

            # Bad - positional
            registry = DefinitionRegistry(["localhost"])  # MalformedDefinitionError!
    """

    pass


class InvalidDefinitionError(WildwireError):
    """
    Raised when a definition cannot be built or stored.

    This error occurs when a definition helper is used incorrectly or
    when a mutable source is handed something that is not a Definition.

    Common causes:
        - Calling ``registry.add_definition("value")`` with a raw value
        - Calling ``SourceChain.add_definition()`` without a mutable source

    Solution:
        Wrap raw values before adding them one at a time::

            registry.add_definition(ValueDefinition("db.host", "localhost"))

        Or use ``add_definitions()``, which accepts raw entries::

            registry.add_definitions({"db.host": "localhost"})
    """

    pass


class AutowiringError(InvalidDefinitionError):
    """
    Raised when an autowire definition cannot be turned into an object definition.

    This error occurs when ``ReflectionAutowiring`` cannot find the class
    named by the definition, or cannot guess a value for one of its
    constructor parameters.

    Common causes:
        - Class name that does not map to an importable class
        - Constructor parameter without a type hint or default value
        - Constructor parameter annotated with a non-class type (``int``, ``str``)

    Solution:
        Give the parameter explicitly::

            registry = DefinitionRegistry(
                {"app\\\\Mailer": autowire().constructor_parameter("port", 25)},
                autowiring=ReflectionAutowiring(),
            )
    """

    pass


class AutowiringDisabledError(AutowiringError):
    """
    Raised when an entry needs autowiring but the registry has none.

    The default collaborator, ``NoAutowiring``, refuses every request.
    Any entry that casts to an ``AutowireDefinition`` (for example one
    declared with ``autowire()``) triggers this error on lookup.

    Solution:
        Provide an autowiring collaborator::

            registry = DefinitionRegistry(
                {"app\\\\Mailer": autowire()},
                autowiring=ReflectionAutowiring(),
            )

        Or declare the entry with ``create()`` and explicit parameters.
    """

    pass
