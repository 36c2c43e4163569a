"""create users table

Revision ID: 5c2e8f1a9b3d
Revises:
Create Date: 2026-10-19 09:12:04.118203

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c2e8f1a9b3d"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "is_account_verified", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        # OTP expiries are epoch milliseconds, 0 when no code is pending
        sa.Column("verify_otp", sa.String(length=6), server_default="", nullable=False),
        sa.Column("verify_otp_expire_at", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column("reset_otp", sa.String(length=6), server_default="", nullable=False),
        sa.Column("reset_otp_expire_at", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
