"""Tests for the create_user CLI helper."""

import unittest

from app.scripts.create_user import create_user
from app.services.user_store import InMemoryUserStore
from tests.helpers import TEST_ROUNDS


class TestCreateUser(unittest.TestCase):
    """create_user returns a process exit code and reports failures on stderr."""

    def test_creates_admin(self) -> None:
        store = InMemoryUserStore()
        code = create_user(store, "root", "hunter22", "Admin", bcrypt_rounds=TEST_ROUNDS)
        self.assertEqual(code, 0)
        self.assertEqual(store.find_by_username("root").role, "Admin")

    def test_duplicate_fails(self) -> None:
        store = InMemoryUserStore()
        create_user(store, "root", "hunter22", "Admin", bcrypt_rounds=TEST_ROUNDS)
        self.assertEqual(
            create_user(store, "root", "other-pw", "User", bcrypt_rounds=TEST_ROUNDS), 1
        )

    def test_weak_password_fails(self) -> None:
        store = InMemoryUserStore()
        self.assertEqual(create_user(store, "root", "123", "User", bcrypt_rounds=TEST_ROUNDS), 1)
        self.assertEqual(len(store), 0)


if __name__ == "__main__":
    unittest.main()
