"""initial_schema

Create the foundational schema for Federate:
- Tree nodes (key-value tree of provider identities, the inverse index and
  pending Twitter handshakes)
- Local users

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 10:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tree_nodes",
        sa.Column("path", sa.String(length=1024), nullable=False),
        sa.Column("value", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("path"),
    )

    op.create_table(
        "local_users",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("display_name", sa.String(length=255), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("idx_local_users_email", "local_users", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_local_users_email", table_name="local_users")
    op.drop_table("local_users")
    op.drop_table("tree_nodes")
