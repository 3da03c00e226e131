"""
Test Configuration and Utilities

Common base classes and helper functions for wildwire tests
"""

import unittest
from typing import Any, Dict, Optional

from wildwire import Autowiring, DefinitionRegistry


class RegistryTestCase(unittest.TestCase):
    """
    Base test case class for registry tests.

    Provides a registry factory and assertions on the wildcard cache.
    """

    def make_registry(
        self,
        definitions: Optional[Dict[str, Any]] = None,
        autowiring: Optional[Autowiring] = None
    ) -> DefinitionRegistry:
        """Create a registry from ``definitions``."""
        return DefinitionRegistry(definitions or {}, autowiring=autowiring)

    def assertCacheUnbuilt(self, registry: DefinitionRegistry):
        """The wildcard cache has not been built since the last mutation"""
        self.assertIsNone(registry._wildcard_definitions)

    def assertCacheBuilt(self, registry: DefinitionRegistry):
        """The wildcard cache has been built since the last mutation"""
        self.assertIsNotNone(registry._wildcard_definitions)
