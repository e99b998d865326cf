"""Tests for app.services.content: posting, newest-first listing and deletion."""

import unittest
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from app.models import Micropost, User
from app.schemas.micropost import MicropostRead
from app.schemas.user import UserCreate
from app.services.content import (
    delete_all_by_user,
    delete_micropost,
    get_micropost,
    microposts_by_user,
    post_micropost,
)
from app.services.errors import AuthorizationError, NotFoundError, ValidationError
from app.services.identity import create_user
from tests.helpers import make_session


def _create(db: Session, email: str) -> User:
    return create_user(
        db,
        UserCreate(
            name="Example User",
            email=email,
            password="foobar",
            password_confirmation="foobar",
        ),
    )


def _micropost_at(db: Session, user: User, content: str, created_at: datetime) -> Micropost:
    """Insert a micropost with an explicit timestamp."""
    micropost = Micropost(user_id=user.id, content=content, created_at=created_at)
    db.add(micropost)
    db.commit()
    return micropost


class ContentTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session()
        self.user = _create(self.db, "user@example.com")
        self.other = _create(self.db, "other@example.com")

    def tearDown(self) -> None:
        self.db.close()


class TestPostMicropost(ContentTestCase):
    """post_micropost validates content and assigns a timestamp."""

    def test_creates_micropost(self) -> None:
        micropost = post_micropost(self.db, self.user, "Lorem ipsum")
        self.assertIsNotNone(micropost.id)
        self.assertEqual(micropost.user_id, self.user.id)
        self.assertIsNotNone(micropost.created_at)
        out = MicropostRead.model_validate(micropost)
        self.assertEqual(out.content, "Lorem ipsum")

    def test_blank_content(self) -> None:
        for content in ("", "   "):
            with self.subTest(content=content):
                with self.assertRaises(ValidationError) as ctx:
                    post_micropost(self.db, self.user, content)
                self.assertEqual(ctx.exception.fields, {"content"})
        self.assertEqual(self.db.query(Micropost).count(), 0)

    def test_too_long_content(self) -> None:
        with self.assertRaises(ValidationError):
            post_micropost(self.db, self.user, "a" * 141)
        post_micropost(self.db, self.user, "a" * 140)
        self.assertEqual(self.db.query(Micropost).count(), 1)


class TestMicropostsByUser(ContentTestCase):
    """microposts_by_user lists one author's posts newest first."""

    def test_newest_first_by_timestamp(self) -> None:
        now = datetime.now(UTC)
        newer = _micropost_at(self.db, self.user, "newer", now - timedelta(hours=1))
        older = _micropost_at(self.db, self.user, "older", now - timedelta(days=1))
        _micropost_at(self.db, self.other, "not mine", now)
        self.assertEqual(
            [m.id for m in microposts_by_user(self.db, self.user)], [newer.id, older.id]
        )

    def test_ties_break_by_most_recent_insert(self) -> None:
        at = datetime(2026, 1, 1, tzinfo=UTC)
        first = _micropost_at(self.db, self.user, "first", at)
        second = _micropost_at(self.db, self.user, "second", at)
        self.assertEqual(
            [m.id for m in microposts_by_user(self.db, self.user)], [second.id, first.id]
        )

    def test_iterator_is_single_use(self) -> None:
        post_micropost(self.db, self.user, "one")
        it = microposts_by_user(self.db, self.user)
        self.assertEqual(len(list(it)), 1)
        self.assertEqual(list(it), [])
        self.assertEqual(len(list(microposts_by_user(self.db, self.user))), 1)

    def test_pagination(self) -> None:
        for i in range(35):
            post_micropost(self.db, self.user, f"post {i}")
        self.assertEqual(len(list(microposts_by_user(self.db, self.user, page=1))), 30)
        self.assertEqual(len(list(microposts_by_user(self.db, self.user, page=2))), 5)
        self.assertEqual(
            len(list(microposts_by_user(self.db, self.user, page=2, per_page=20))), 15
        )
        with self.assertRaises(ValidationError):
            microposts_by_user(self.db, self.user, page=0)
        with self.assertRaises(ValidationError):
            microposts_by_user(self.db, self.user, page=1, per_page=500)


class TestDeleteMicropost(ContentTestCase):
    """Only the author may delete a micropost."""

    def test_author_deletes(self) -> None:
        micropost = post_micropost(self.db, self.user, "bye")
        micropost_id = micropost.id
        delete_micropost(self.db, self.user, micropost)
        with self.assertRaises(NotFoundError):
            get_micropost(self.db, micropost_id)

    def test_other_user_is_refused(self) -> None:
        micropost = post_micropost(self.db, self.user, "mine")
        with self.assertRaises(AuthorizationError):
            delete_micropost(self.db, self.other, micropost)
        self.assertEqual(get_micropost(self.db, micropost.id).content, "mine")

    def test_delete_all_by_user(self) -> None:
        post_micropost(self.db, self.user, "a")
        post_micropost(self.db, self.user, "b")
        post_micropost(self.db, self.other, "c")
        self.assertEqual(delete_all_by_user(self.db, self.user), 2)
        self.db.commit()
        self.assertEqual(
            [m.content for m in self.db.query(Micropost).all()], ["c"]
        )

    def test_get_unknown(self) -> None:
        with self.assertRaises(NotFoundError):
            get_micropost(self.db, 424242)


if __name__ == "__main__":
    unittest.main()
