"""Unit tests for app.services.validation: pure field rules with accumulated errors."""

import unittest

from app.services.validation import (
    normalize_email,
    validate_email,
    validate_micropost_content,
    validate_name,
    validate_password,
    validate_user_fields,
)


def _rules(errors) -> list[tuple[str, str]]:
    return [(e.field, e.rule) for e in errors]


class TestValidateName(unittest.TestCase):
    """Name is required and at most 50 characters."""

    def test_valid(self) -> None:
        self.assertEqual(validate_name("Example User"), [])

    def test_blank(self) -> None:
        self.assertEqual(_rules(validate_name("")), [("name", "required")])
        self.assertEqual(_rules(validate_name("   ")), [("name", "required")])
        self.assertEqual(_rules(validate_name(None)), [("name", "required")])

    def test_too_long(self) -> None:
        self.assertEqual(_rules(validate_name("a" * 51)), [("name", "too_long")])

    def test_exactly_max(self) -> None:
        self.assertEqual(validate_name("a" * 50), [])


class TestValidateEmail(unittest.TestCase):
    """Email is required and must look like local@domain.tld."""

    def test_accepts_valid_addresses(self) -> None:
        for address in ("user@foo.com", "THE_USER@foo.bar.org", "first.last@foo.jp"):
            with self.subTest(address=address):
                self.assertEqual(validate_email(address), [])

    def test_rejects_invalid_addresses(self) -> None:
        for address in (
            "user@foo,com",
            "user_at_foo.org",
            "example.user@foo.",
            "\u00fcser@foo.com",
            "user@b\u00fccher.de",
            "a@foo.\u212a",
        ):
            with self.subTest(address=address):
                self.assertEqual(_rules(validate_email(address)), [("email", "invalid")])

    def test_blank(self) -> None:
        self.assertEqual(_rules(validate_email("")), [("email", "required")])

    def test_normalize_email(self) -> None:
        self.assertEqual(normalize_email("  A@X.Com "), "a@x.com")


class TestValidatePassword(unittest.TestCase):
    """Password: required, 6-40 characters, confirmation present and matching."""

    def test_valid(self) -> None:
        self.assertEqual(validate_password("foobar", "foobar"), [])

    def test_blank_password_and_confirmation(self) -> None:
        self.assertEqual(
            _rules(validate_password("", "")),
            [("password", "required"), ("password_confirmation", "required")],
        )

    def test_mismatch(self) -> None:
        self.assertEqual(
            _rules(validate_password("foobar", "invalid")),
            [("password_confirmation", "mismatch")],
        )

    def test_too_short(self) -> None:
        short = "a" * 5
        self.assertEqual(_rules(validate_password(short, short)), [("password", "too_short")])

    def test_too_long(self) -> None:
        long = "a" * 41
        self.assertEqual(_rules(validate_password(long, long)), [("password", "too_long")])

    def test_bounds_inclusive(self) -> None:
        self.assertEqual(validate_password("a" * 6, "a" * 6), [])
        self.assertEqual(validate_password("a" * 40, "a" * 40), [])

    def test_multibyte_password_over_bcrypt_limit(self) -> None:
        # 40 characters but 88 UTF-8 bytes
        long = "\u20ac" * 24 + "a" * 16
        self.assertEqual(_rules(validate_password(long, long)), [("password", "too_long")])
        exact = "\u20ac" * 24
        self.assertEqual(validate_password(exact, exact), [])


class TestValidateUserFields(unittest.TestCase):
    """All user rules are accumulated rather than stopping at the first failure."""

    def test_all_blank_reports_every_field(self) -> None:
        errors = validate_user_fields("", "", "", "")
        self.assertEqual(
            {e.field for e in errors},
            {"name", "email", "password", "password_confirmation"},
        )
        for e in errors:
            self.assertTrue(e.message)


class TestValidateMicropostContent(unittest.TestCase):
    """Content is required and at most 140 characters."""

    def test_valid(self) -> None:
        self.assertEqual(validate_micropost_content("hello"), [])
        self.assertEqual(validate_micropost_content("a" * 140), [])

    def test_blank(self) -> None:
        self.assertEqual(_rules(validate_micropost_content("  ")), [("content", "required")])

    def test_too_long(self) -> None:
        self.assertEqual(
            _rules(validate_micropost_content("a" * 141)), [("content", "too_long")]
        )


if __name__ == "__main__":
    unittest.main()
