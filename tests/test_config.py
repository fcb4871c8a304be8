"""Unit tests for app.core.config.Settings: DB URL assembly and validators."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides: object) -> Settings:
    defaults: dict[str, object] = {
        "DB_HOST": "",
        "DB_PORT": None,
        "DB_USER": "",
        "DB_PASSWORD": "",
        "DB_NAME": "",
        "DATABASE_URL": None,
    }
    defaults.update(overrides)
    return Settings(**defaults)


class TestDatabaseUrl(unittest.TestCase):
    def test_blank_parts_still_build_a_url(self) -> None:
        url = _settings().database_url()
        self.assertEqual(url.drivername, "postgresql+psycopg2")
        self.assertIsNone(url.host)
        self.assertIsNone(url.username)
        self.assertIsNone(url.database)

    def test_parts(self) -> None:
        url = _settings(
            DB_HOST="db.internal", DB_PORT=5432, DB_USER="app", DB_PASSWORD="s3cret", DB_NAME="panel"
        ).database_url()
        self.assertEqual(url.host, "db.internal")
        self.assertEqual(url.port, 5432)
        self.assertEqual(url.username, "app")
        self.assertEqual(url.password, "s3cret")
        self.assertEqual(url.database, "panel")

    def test_database_url_overrides_parts(self) -> None:
        url = _settings(DB_HOST="ignored", DATABASE_URL=" sqlite:///panel.db ").database_url()
        self.assertEqual(url.get_backend_name(), "sqlite")
        self.assertEqual(url.database, "panel.db")

    def test_blank_database_url_is_none(self) -> None:
        self.assertIsNone(_settings(DATABASE_URL="   ").DATABASE_URL)


class TestLoggableConfig(unittest.TestCase):
    def test_password_masked(self) -> None:
        cfg = _settings(DB_PASSWORD="s3cret").loggable_db_config()
        self.assertEqual(cfg["password"], "********")
        self.assertNotIn("s3cret", str(cfg))

    def test_no_password(self) -> None:
        self.assertIsNone(_settings().loggable_db_config()["password"])


class TestValidators(unittest.TestCase):
    def test_bcrypt_rounds_default(self) -> None:
        self.assertEqual(Settings.model_fields["BCRYPT_ROUNDS"].default, 10)

    def test_bcrypt_rounds_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)

    def test_db_port_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DB_PORT=70000)

    def test_connect_retries_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DB_CONNECT_RETRIES=0)


if __name__ == "__main__":
    unittest.main()
