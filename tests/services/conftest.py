from tests.fixtures import pool, test_engine  # noqa: F401
