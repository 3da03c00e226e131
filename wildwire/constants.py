"""
Constants

Wildcard syntax used by registry keys and the package logger name.
"""

LOGGER_NAME: str = "wildwire"
"""Root logger name for wildwire diagnostics."""

WILDCARD: str = "*"
"""Marker character inside a registry key or an object definition's class name."""

NAMESPACE_SEPARATOR: str = "\\"
"""Separator between namespace segments of an entry name. A wildcard never spans it."""

WILDCARD_PATTERN: str = r"([^\\]+)"
"""Regex group substituted for each wildcard: one or more non-separator characters."""
