"""Tests for the init_db and create_user command-line scripts."""

import unittest
from unittest.mock import patch

from app.core.database import ConnectionManager, StorageUnavailableError
from app.models import User
from app.schemas.auth import Role, SampleUserCredentials
from app.scripts import create_user, init_db


class TestInitDbScript(unittest.TestCase):
    def test_success_returns_zero(self) -> None:
        seeded = [SampleUserCredentials(user_identifier="testUser", role_hint=Role.SUPER_ADMIN)]
        with patch("app.scripts.init_db.initialize_database", return_value=seeded) as init:
            self.assertEqual(init_db.main(), 0)
        init.assert_called_once()

    def test_storage_failure_returns_one(self) -> None:
        with patch(
            "app.scripts.init_db.initialize_database",
            side_effect=StorageUnavailableError("Could not connect to DB."),
        ):
            with self.assertLogs("app.scripts.init_db", level="ERROR") as logs:
                self.assertEqual(init_db.main(), 1)
        self.assertIn("Could not connect to DB.", logs.output[0])


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self.manager = ConnectionManager("sqlite://")
        patcher = patch("app.scripts.create_user.db_manager", self.manager)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.manager.dispose)

    def test_creates_user_with_defaults(self) -> None:
        self.assertEqual(create_user.main(["jdoe", "pw"]), 0)
        session = self.manager.session()
        try:
            user = session.query(User).filter(User.user_identifier == "jdoe").one()
            self.assertEqual(user.email, "jdoe@example.com")
        finally:
            session.close()

    def test_existing_identifier_returns_one(self) -> None:
        self.assertEqual(create_user.main(["jdoe", "pw"]), 0)
        self.assertEqual(create_user.main(["jdoe", "pw2", "--email", "other@example.com"]), 1)

    def test_duplicate_email_returns_one(self) -> None:
        self.assertEqual(create_user.main(["a", "pw", "--email", "x@example.com"]), 0)
        self.assertEqual(create_user.main(["b", "pw", "--email", "x@example.com"]), 1)

    def test_blank_identifier_returns_one(self) -> None:
        self.assertEqual(create_user.main(["   ", "pw"]), 1)

    def test_unreachable_database_returns_one(self) -> None:
        with patch.object(
            self.manager, "get_engine", side_effect=StorageUnavailableError("Could not connect to DB.")
        ):
            self.assertEqual(create_user.main(["jdoe", "pw"]), 1)


if __name__ == "__main__":
    unittest.main()
