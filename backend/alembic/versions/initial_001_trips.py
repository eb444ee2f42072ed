"""Create trips, flights, hotels and itineraries tables

Revision ID: initial_001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision = "initial_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "trips",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("destination", sa.String(255), nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("budget", sa.Numeric(10, 2), server_default="0"),
        sa.Column("vibe", sa.String(50), server_default="leisure"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "flights",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("trip_id", UUID(as_uuid=True), sa.ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer, server_default="0"),
        sa.Column("airline", sa.String(100), nullable=False),
        sa.Column("price", sa.Integer, server_default="0"),
        sa.Column("depart_time", sa.String(64)),
        sa.Column("arrive_time", sa.String(64)),
        sa.Column("duration", sa.String(32)),
        sa.Column("stopovers", sa.Integer, server_default="0"),
    )
    op.create_index("ix_flights_trip_id", "flights", ["trip_id"])

    op.create_table(
        "hotels",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("trip_id", UUID(as_uuid=True), sa.ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer, server_default="0"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price_per_night", sa.Integer, server_default="0"),
        sa.Column("rating", sa.Float, server_default="0"),
        sa.Column("location", sa.Text, server_default="Unknown"),
    )
    op.create_index("ix_hotels_trip_id", "hotels", ["trip_id"])

    op.create_table(
        "itineraries",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("trip_id", UUID(as_uuid=True), sa.ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("json_data", JSONB, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("itineraries")
    op.drop_index("ix_hotels_trip_id", table_name="hotels")
    op.drop_table("hotels")
    op.drop_index("ix_flights_trip_id", table_name="flights")
    op.drop_table("flights")
    op.drop_table("trips")
