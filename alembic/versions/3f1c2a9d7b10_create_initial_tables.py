"""Create initial tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:04.118532

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

player_role = sa.Enum("ADMIN", "PLAYER", name="playerrole")
match_status = sa.Enum(
    "ORGANIZING", "CONFIRMED", "BOOKED", "CANCELLED", name="matchstatus"
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column("hashed_password", sa.String(), nullable=True),
        sa.Column("role", player_role, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_players_email"), "players", ["email"], unique=True)
    op.create_index(op.f("ix_players_id"), "players", ["id"], unique=False)
    op.create_index(op.f("ix_players_name"), "players", ["name"], unique=False)

    op.create_table(
        "courts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("surface_type", sa.String(), nullable=True),
        sa.Column("is_indoor", sa.Boolean(), nullable=True),
        sa.Column("has_lighting", sa.Boolean(), nullable=True),
        sa.Column("price_per_hour", sa.Float(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_courts_id"), "courts", ["id"], unique=False)

    op.create_table(
        "opening_hours",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("day_of_week", "time", name="uq_opening_hour_day_time"),
    )
    op.create_index(
        op.f("ix_opening_hours_day_of_week"), "opening_hours", ["day_of_week"]
    )

    op.create_table(
        "time_slot_requests",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "player_id", "date", "time", name="uq_time_slot_request_player_slot"
        ),
    )
    op.create_index(
        op.f("ix_time_slot_requests_date"), "time_slot_requests", ["date"]
    )
    op.create_index(op.f("ix_time_slot_requests_id"), "time_slot_requests", ["id"])

    op.create_table(
        "matches",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("court_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("status", match_status, nullable=False),
        sa.Column("organizer_id", sa.Integer(), nullable=True),
        sa.Column("booked_by_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["court_id"], ["courts.id"]),
        sa.ForeignKeyConstraint(["organizer_id"], ["players.id"]),
        sa.ForeignKeyConstraint(["booked_by_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_matches_id"), "matches", ["id"])
    op.create_index(op.f("ix_matches_date"), "matches", ["date"])

    # Índice único parcial: una sola reserva activa por cancha, fecha y hora
    op.execute("""
        CREATE UNIQUE INDEX IF NOT EXISTS uq_active_match_per_court_slot
        ON matches (court_id, date, time)
        WHERE status != 'CANCELLED';
    """)

    op.create_table(
        "match_players",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("match_id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["match_id"], ["matches.id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("match_id", "player_id", name="uq_match_player"),
    )

    op.create_table(
        "match_invitations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("match_id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["match_id"], ["matches.id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("match_id", "player_id", name="uq_match_invitation"),
    )

    # Un jugador ocupa a lo sumo una cancha por fecha y hora
    op.create_table(
        "player_slots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("match_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.ForeignKeyConstraint(["match_id"], ["matches.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("player_id", "date", "time", name="uq_player_slot"),
    )
    op.create_index(op.f("ix_player_slots_id"), "player_slots", ["id"])
    op.create_index(op.f("ix_player_slots_match_id"), "player_slots", ["match_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_player_slots_match_id"), table_name="player_slots")
    op.drop_index(op.f("ix_player_slots_id"), table_name="player_slots")
    op.drop_table("player_slots")
    op.drop_table("match_invitations")
    op.drop_table("match_players")
    op.execute("DROP INDEX IF EXISTS uq_active_match_per_court_slot;")
    op.drop_index(op.f("ix_matches_date"), table_name="matches")
    op.drop_index(op.f("ix_matches_id"), table_name="matches")
    op.drop_table("matches")
    op.drop_index(op.f("ix_time_slot_requests_id"), table_name="time_slot_requests")
    op.drop_index(op.f("ix_time_slot_requests_date"), table_name="time_slot_requests")
    op.drop_table("time_slot_requests")
    op.drop_index(op.f("ix_opening_hours_day_of_week"), table_name="opening_hours")
    op.drop_table("opening_hours")
    op.drop_index(op.f("ix_courts_id"), table_name="courts")
    op.drop_table("courts")
    op.drop_index(op.f("ix_players_name"), table_name="players")
    op.drop_index(op.f("ix_players_id"), table_name="players")
    op.drop_index(op.f("ix_players_email"), table_name="players")
    op.drop_table("players")
    match_status.drop(op.get_bind(), checkfirst=True)
    player_role.drop(op.get_bind(), checkfirst=True)
