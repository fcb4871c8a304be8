"""Unit tests for app.core.security password hashing."""

import unittest

from app.core.security import hash_password, verify_password


class TestHashPassword(unittest.TestCase):
    def test_uses_configured_cost_factor(self) -> None:
        hashed = hash_password("password123")
        self.assertTrue(hashed.startswith("$2b$10$"))

    def test_explicit_rounds(self) -> None:
        self.assertTrue(hash_password("password123", rounds=4).startswith("$2b$04$"))

    def test_salted(self) -> None:
        self.assertNotEqual(hash_password("same", rounds=4), hash_password("same", rounds=4))


class TestVerifyPassword(unittest.TestCase):
    def test_matching_password(self) -> None:
        hashed = hash_password("password123", rounds=4)
        self.assertTrue(verify_password("password123", hashed))

    def test_wrong_password(self) -> None:
        hashed = hash_password("password123", rounds=4)
        self.assertFalse(verify_password("password124", hashed))

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("password123", "not-a-bcrypt-hash"))


if __name__ == "__main__":
    unittest.main()
