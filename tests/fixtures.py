"""
Test Fixtures

Common test classes used across test modules
"""

from wildwire import Autowiring, ObjectDefinition


class Database:
    """Test database class"""

    def __init__(self):
        self.name = "TestDB"


class CacheService:
    """Test cache service"""

    def __init__(self):
        self.cache = {}


class UserRepository:
    """Test repository with dependencies"""

    def __init__(self, db: Database, cache: CacheService):
        self.db = db
        self.cache = cache


class Mailer:
    """Service with a scalar parameter and a default"""

    def __init__(self, host: str, port: int = 25):
        self.host = host
        self.port = port


class ServiceWithoutHint:
    """Service with missing type hint - for error testing"""

    def __init__(self, dependency):  # No type hint!
        self.dependency = dependency


class ServiceWithVarArgs:
    """Service accepting *args and **kwargs"""

    def __init__(self, db: Database, *args, **kwargs):
        self.db = db


class Plain:
    """Class without a constructor"""
    pass


class CallableService:
    """Instances are callable"""

    def __call__(self):
        return "called"


class StubAutowiring(Autowiring):
    """Autowiring returning a sentinel object definition and recording calls"""

    def __init__(self):
        self.calls = []

    def autowire(self, name, definition=None):
        self.calls.append((name, definition))
        return ObjectDefinition(name, class_name="stub\\Sentinel")


class FailingAutowiring(Autowiring):
    """Autowiring that always fails with a non-wildwire error"""

    def autowire(self, name, definition=None):
        raise RuntimeError(f"cannot autowire {name}")
