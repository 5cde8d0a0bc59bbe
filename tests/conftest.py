import pytest
from config import ApplicationConfig


class TestConfig(ApplicationConfig):
    DB_URI = "sqlite+aiosqlite://"
    DB_CREATE_TABLES = False
    BASIC_AUTH_ENABLE = False
    BASIC_AUTH_USERNAME = "USERNAME"
    BASIC_AUTH_PASSWORD = "PASSWORD"


class AuthTestConfig(TestConfig):
    BASIC_AUTH_ENABLE = True


@pytest.fixture
def test_config():
    return TestConfig


@pytest.fixture
def auth_test_config():
    return AuthTestConfig
