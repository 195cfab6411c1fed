"""Initial Eco Track schema.

Creates users and password reset tokens, the quiz bank and attempts,
carbon footprints, daily challenges, the community feed, badges, blog posts,
eco locations and events, and tree planting tables.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-18
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001_initial_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _id() -> sa.Column:
    return sa.Column("id", sa.String(36), primary_key=True)


def _user_fk(name: str = "user_id", *, nullable: bool = False, ondelete: str = "CASCADE") -> sa.Column:
    return sa.Column(name, sa.String(36), sa.ForeignKey("users.id", ondelete=ondelete), nullable=nullable)


def _ts(name: str, *, nullable: bool = False) -> sa.Column:
    default = None if nullable else sa.func.now()
    return sa.Column(name, sa.DateTime(timezone=True), nullable=nullable, server_default=default)


def upgrade() -> None:
    """Create all tables."""
    # --- Users ---
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.String(256), nullable=False),
        sa.Column("full_name", sa.String(128), nullable=True),
        sa.Column("role", sa.String(16), server_default="user", nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.execute("ALTER TABLE users ADD CONSTRAINT ck_users_role CHECK (role IN ('user', 'admin'))")

    op.create_table(
        "password_reset_tokens",
        _id(),
        _user_fk(),
        sa.Column("token_hash", sa.String(128), nullable=False, unique=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        _ts("used_at", nullable=True),
        _ts("created_at"),
    )
    op.create_index("ix_password_reset_tokens_user_id", "password_reset_tokens", ["user_id"])

    # --- Quiz ---
    op.create_table(
        "quiz_questions",
        _id(),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("difficulty", sa.String(16), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("points", sa.Integer(), server_default="10", nullable=False),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="true", nullable=False),
        _user_fk("created_by", nullable=True, ondelete="SET NULL"),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("idx_quiz_questions_active_category", "quiz_questions", ["is_active", "category"])
    op.execute(
        "ALTER TABLE quiz_questions ADD CONSTRAINT ck_quiz_questions_difficulty "
        "CHECK (difficulty IN ('easy', 'medium', 'hard'))"
    )

    op.create_table(
        "quiz_answers",
        _id(),
        sa.Column(
            "question_id",
            sa.String(36),
            sa.ForeignKey("quiz_questions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("answer_text", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
    )
    op.create_index("ix_quiz_answers_question_id", "quiz_answers", ["question_id"])

    op.create_table(
        "quiz_attempts",
        _id(),
        _user_fk(),
        sa.Column("score", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), server_default="0", nullable=False),
        sa.Column("time_taken", sa.Integer(), nullable=True),
        sa.Column("answers", sa.JSON(), nullable=False),
        _ts("completed_at"),
    )
    op.create_index("idx_quiz_attempts_user_completed", "quiz_attempts", ["user_id", "completed_at"])

    # --- Carbon footprints & daily challenges ---
    op.create_table(
        "carbon_footprints",
        _id(),
        _user_fk(),
        sa.Column("electricity_kwh", sa.Float(), server_default="0", nullable=False),
        sa.Column("transportation_km", sa.Float(), server_default="0", nullable=False),
        sa.Column("transportation_type", sa.String(32), server_default="", nullable=False),
        sa.Column("waste_kg", sa.Float(), server_default="0", nullable=False),
        sa.Column("total_co2_kg", sa.Float(), nullable=False),
        sa.Column("category", sa.String(8), nullable=False),
        _ts("calculated_at"),
    )
    op.create_index("idx_carbon_footprints_user_calculated", "carbon_footprints", ["user_id", "calculated_at"])
    op.execute(
        "ALTER TABLE carbon_footprints ADD CONSTRAINT ck_carbon_footprints_category "
        "CHECK (category IN ('Low', 'Medium', 'High'))"
    )

    op.create_table(
        "daily_challenges",
        _id(),
        _user_fk(),
        sa.Column("challenge_name", sa.String(256), nullable=False),
        sa.Column("completed", sa.Boolean(), server_default="false", nullable=False),
        _ts("completed_at", nullable=True),
        sa.Column("challenge_date", sa.Date(), server_default=sa.func.current_date(), nullable=False),
    )
    op.create_index("idx_daily_challenges_user_date", "daily_challenges", ["user_id", "challenge_date"])

    # --- Community ---
    op.create_table(
        "community_posts",
        _id(),
        _user_fk(),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        _ts("created_at"),
    )
    op.create_index("ix_community_posts_created_at", "community_posts", ["created_at"])

    op.create_table(
        "post_comments",
        _id(),
        sa.Column(
            "post_id",
            sa.String(36),
            sa.ForeignKey("community_posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _user_fk(),
        sa.Column("content", sa.Text(), nullable=False),
        _ts("created_at"),
    )
    op.create_index("idx_post_comments_post_created", "post_comments", ["post_id", "created_at"])

    # --- Badges ---
    op.create_table(
        "badges",
        _id(),
        sa.Column("name", sa.String(128), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("icon", sa.String(64), nullable=False),
        sa.Column("requirement", sa.String(64), nullable=False),
        _ts("created_at"),
    )

    op.create_table(
        "user_badges",
        _id(),
        _user_fk(),
        sa.Column("badge_id", sa.String(36), sa.ForeignKey("badges.id", ondelete="CASCADE"), nullable=False),
        _ts("earned_at"),
        sa.UniqueConstraint("user_id", "badge_id", name="uq_user_badges_user_badge"),
    )
    op.create_index("ix_user_badges_user_id", "user_badges", ["user_id"])

    # --- Content ---
    op.create_table(
        "blog_posts",
        _id(),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("author", sa.String(128), server_default="Eco Track Team", nullable=False),
        _ts("published_at"),
        _ts("created_at"),
    )

    op.create_table(
        "eco_locations",
        _id(),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("city", sa.String(64), nullable=True),
        _ts("created_at"),
    )
    op.create_index("ix_eco_locations_category", "eco_locations", ["category"])

    op.create_table(
        "eco_events",
        _id(),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("event_type", sa.String(64), nullable=False),
        sa.Column("event_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("event_time", sa.String(32), nullable=True),
        sa.Column("location_name", sa.String(256), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("city", sa.String(64), nullable=True),
        sa.Column("district", sa.String(64), nullable=False),
        sa.Column("division", sa.String(64), nullable=False),
        sa.Column("organizer", sa.String(128), nullable=True),
        sa.Column("contact_info", sa.String(256), nullable=True),
        sa.Column("max_participants", sa.Integer(), server_default="50", nullable=False),
        sa.Column("current_participants", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default="true", nullable=False),
        _user_fk("created_by", nullable=True, ondelete="SET NULL"),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index(
        "idx_eco_events_filter",
        "eco_events",
        ["event_type", "district", "division", "event_date", "is_active"],
    )

    # --- Tree planting ---
    op.create_table(
        "planting_areas",
        _id(),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("district", sa.String(64), nullable=False),
        sa.Column("division", sa.String(64), nullable=False),
        sa.Column("problem_type", sa.String(64), server_default="Deforestation", nullable=False),
        sa.Column("is_planted", sa.Boolean(), server_default="false", nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )

    op.create_table(
        "planted_trees",
        _id(),
        sa.Column(
            "planting_area_id",
            sa.String(36),
            sa.ForeignKey("planting_areas.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("tree_type", sa.String(128), nullable=False),
        _user_fk("planted_by", nullable=True, ondelete="SET NULL"),
        _ts("planted_at"),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_planted_trees_planting_area_id", "planted_trees", ["planting_area_id"])
    op.create_index("ix_planted_trees_planted_by", "planted_trees", ["planted_by"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table in (
        "planted_trees",
        "planting_areas",
        "eco_events",
        "eco_locations",
        "blog_posts",
        "user_badges",
        "badges",
        "post_comments",
        "community_posts",
        "daily_challenges",
        "carbon_footprints",
        "quiz_attempts",
        "quiz_answers",
        "quiz_questions",
        "password_reset_tokens",
        "users",
    ):
        op.drop_table(table)
