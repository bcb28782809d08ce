"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"DATABASE_URL": "sqlite://"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestJwtSettings(unittest.TestCase):
    """JWT fields."""

    def test_blank_secret_is_treated_as_missing(self) -> None:
        self.assertIsNone(_settings(JWT_SECRET="   ").JWT_SECRET)

    def test_secret_kept(self) -> None:
        secret = _settings(JWT_SECRET="s" * 40).JWT_SECRET
        self.assertEqual(secret.get_secret_value(), "s" * 40)

    def test_default_expiry_is_two_hours(self) -> None:
        self.assertEqual(_settings().JWT_EXPIRE_MINUTES, 120)

    def test_algorithm_normalized_and_restricted(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM="hs384").JWT_ALGORITHM, "HS384")
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)

    def test_blank_issuer_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ISSUER=" ")


class TestOtherSettings(unittest.TestCase):
    """Database URL, log level and bcrypt cost."""

    def test_database_url_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://localhost/db")

    def test_log_level(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)


class TestCorsSettings(unittest.TestCase):
    """CORS origins default per environment; an explicit list always wins."""

    def test_dev_defaults_to_any_origin(self) -> None:
        self.assertEqual(_settings(APP_ENV="dev").CORS_ALLOW_ORIGINS, ["*"])

    def test_prod_defaults_to_no_origins(self) -> None:
        self.assertEqual(_settings(APP_ENV="prod").CORS_ALLOW_ORIGINS, [])

    def test_explicit_origins_kept_in_prod(self) -> None:
        origins = ["https://app.example.com"]
        settings = _settings(APP_ENV="prod", CORS_ALLOW_ORIGINS=origins)
        self.assertEqual(settings.CORS_ALLOW_ORIGINS, origins)

    def test_explicit_empty_list_kept_in_dev(self) -> None:
        self.assertEqual(_settings(APP_ENV="dev", CORS_ALLOW_ORIGINS=[]).CORS_ALLOW_ORIGINS, [])


if __name__ == "__main__":
    unittest.main()
