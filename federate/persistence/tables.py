"""SQLAlchemy table definitions for Federate.

These table definitions are used with manual row mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import JSON, Column, DateTime, Index, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TREE NODES TABLE (key-value tree of identity data)
# ============================================================================
tree_nodes_table = Table(
    "tree_nodes",
    metadata,
    Column("path", String(1024), primary_key=True),  # /socialIdentities/google/42
    Column("value", JSON, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# ============================================================================
# LOCAL USERS TABLE
# ============================================================================
local_users_table = Table(
    "local_users",
    metadata,
    Column("id", String(255), primary_key=True),  # e.g. googleUserId::42
    Column("email", String(255), nullable=True, unique=True),
    Column("display_name", String(255), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_local_users_email", local_users_table.c.email)
