"""
Definition Helper Tests

Tests for create(), autowire(), factory(), value() and get().
"""

import unittest

from wildwire import (
    AutowireDefinition,
    FactoryDefinition,
    InvalidDefinitionError,
    MethodInjection,
    ObjectDefinition,
    Reference,
    ValueDefinition,
    autowire,
    create,
    factory,
    get,
    value,
)


class TestCreateHelper(unittest.TestCase):
    """create() builds object definitions."""

    def test_defaults(self):
        """Without configuration the class name is the entry name"""
        definition = create().get_definition("app\\Mailer")

        self.assertIsInstance(definition, ObjectDefinition)
        self.assertNotIsInstance(definition, AutowireDefinition)
        self.assertEqual(definition.class_name, "app\\Mailer")
        self.assertIsNone(definition.constructor_injection)
        self.assertEqual(definition.property_injections, {})
        self.assertEqual(definition.method_injections, [])
        self.assertFalse(definition.lazy)

    def test_constructor_arguments(self):
        """Positional arguments are keyed by index, keywords by name"""
        definition = create().constructor(get("db.host"), port=25).get_definition("mailer")

        self.assertEqual(
            definition.constructor_injection,
            MethodInjection("__init__", {0: Reference("", "db.host"), "port": 25}),
        )

    def test_properties_methods_and_lazy(self):
        """Fluent calls accumulate injections"""
        helper = (
            create("app\\SmtpMailer")
            .property("debug", True)
            .method("add_header", "X-App", "wildwire")
            .method("add_header", "X-Env", "test")
            .lazy()
        )

        definition = helper.get_definition("mailer")

        self.assertEqual(definition.class_name, "app\\SmtpMailer")
        self.assertEqual(definition.property_injections, {"debug": True})
        self.assertEqual(
            [m.parameters for m in definition.method_injections],
            [{0: "X-App", 1: "wildwire"}, {0: "X-Env", 1: "test"}],
        )
        self.assertTrue(definition.lazy)

    def test_each_definition_is_independent(self):
        """Mutating one built definition does not affect the next"""
        helper = create("app\\*Impl").property("debug", True)

        first = helper.get_definition("a")
        first.class_name = "changed"
        first.property_injections["debug"] = False
        second = helper.get_definition("b")

        self.assertEqual(second.class_name, "app\\*Impl")
        self.assertEqual(second.property_injections, {"debug": True})


class TestAutowireHelper(unittest.TestCase):
    """autowire() builds autowire markers."""

    def test_builds_autowire_definition(self):
        """The definition is the autowire variant"""
        definition = autowire().get_definition("app\\Mailer")

        self.assertIsInstance(definition, AutowireDefinition)
        self.assertEqual(definition.class_name, "app\\Mailer")

    def test_constructor_parameter(self):
        """Single parameters are set by name"""
        definition = (
            autowire()
            .constructor_parameter("host", "smtp.local")
            .constructor_parameter("port", 25)
            .get_definition("mailer")
        )

        self.assertEqual(definition.constructor_injection.parameters, {"host": "smtp.local", "port": 25})

    def test_method_parameter_reuses_method(self):
        """Parameters for the same method end up in one call"""
        definition = (
            autowire()
            .method_parameter("configure", "level", 1)
            .method_parameter("configure", "mode", "fast")
            .get_definition("svc")
        )

        self.assertEqual(
            definition.method_injections,
            [MethodInjection("configure", {"level": 1, "mode": "fast"})],
        )


class TestFactoryHelper(unittest.TestCase):
    """factory() builds factory definitions."""

    def test_factory_with_parameters(self):
        """Extra parameters are passed along"""
        func = lambda host: host

        definition = factory(func).parameter("host", get("db.host")).get_definition("conn")

        self.assertIsInstance(definition, FactoryDefinition)
        self.assertIs(definition.factory, func)
        self.assertEqual(definition.parameters, {"host": Reference("", "db.host")})

    def test_factory_requires_callable(self):
        """Non-callables are rejected early"""
        with self.assertRaises(InvalidDefinitionError) as ctx:
            factory(42)

        self.assertIn("value()", str(ctx.exception))


class TestValueAndGet(unittest.TestCase):
    """value() and get() return unnamed definitions."""

    def test_value(self):
        """value() wraps anything"""
        self.assertEqual(value([1, 2]), ValueDefinition("", [1, 2]))

    def test_get(self):
        """get() references another entry"""
        self.assertEqual(get("db.host"), Reference("", "db.host"))


class TestMethodInjection(unittest.TestCase):
    """MethodInjection.merge() fills missing parameters."""

    def test_merge_keeps_existing(self):
        """Existing parameters win over merged ones"""
        injection = MethodInjection("__init__", {"a": 1})

        injection.merge(MethodInjection("__init__", {"a": 2, "b": 3}))

        self.assertEqual(injection.parameters, {"a": 1, "b": 3})


if __name__ == '__main__':
    unittest.main()
