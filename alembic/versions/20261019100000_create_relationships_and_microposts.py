"""Create relationships (follow edges) and microposts.

Revision ID: 20261019100000
Revises: 20261019000000
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019100000"
down_revision: Union[str, None] = "20261019000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "relationships",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("follower_id", sa.Integer(), nullable=False),
        sa.Column("followed_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followed_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "follower_id", "followed_id", name="uq_relationships_follower_followed"
        ),
        sa.CheckConstraint("follower_id <> followed_id", name="ck_relationships_not_self"),
    )
    op.create_index(
        op.f("ix_relationships_follower_id"), "relationships", ["follower_id"]
    )
    op.create_index(
        op.f("ix_relationships_followed_id"), "relationships", ["followed_id"]
    )

    op.create_table(
        "microposts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.String(length=140), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_microposts_user_id_created_at", "microposts", ["user_id", "created_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_microposts_user_id_created_at", table_name="microposts")
    op.drop_table("microposts")
    op.drop_index(op.f("ix_relationships_followed_id"), table_name="relationships")
    op.drop_index(op.f("ix_relationships_follower_id"), table_name="relationships")
    op.drop_table("relationships")
