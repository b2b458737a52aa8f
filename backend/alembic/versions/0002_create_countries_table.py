"""Create countries table."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0002_create_countries_table"
down_revision = "0001_create_users_table"
branch_labels = None
depends_on = None

GOVERNMENT_TYPE = sa.Enum(
    "Democracy",
    "Monarchy",
    "Republic",
    "Oligarchy",
    "Theocracy",
    "Socialist",
    "Communist",
    "Dictatorship",
    name="government_type",
)


def upgrade() -> None:
    GOVERNMENT_TYPE.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "countries",
        sa.Column(
            "id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False
        ),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("government", GOVERNMENT_TYPE, nullable=False),
        sa.Column("values", postgresql.JSONB(), nullable=False),
        sa.Column("flag", postgresql.JSONB(), nullable=False),
        sa.Column("population", sa.BigInteger(), nullable=False),
        sa.Column("economy", sa.BigInteger(), nullable=False),
        sa.Column("environment", sa.Integer(), nullable=False),
        sa.Column("buildings", postgresql.JSONB(), nullable=False),
        sa.Column("construction_queue", postgresql.JSONB(), nullable=False),
        sa.Column(
            "last_resource_update", sa.DateTime(timezone=True), nullable=False
        ),
        sa.Column("version_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_countries"),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.id"],
            name="fk_countries_owner_id_users",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint("owner_id", name="uq_countries_owner_id"),
    )

    op.create_index("ix_countries_name", "countries", ["name"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_countries_name", table_name="countries")
    op.drop_table("countries")
    GOVERNMENT_TYPE.drop(op.get_bind(), checkfirst=True)
