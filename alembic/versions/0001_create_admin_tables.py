"""create admin tables

Revision ID: 0001_create_admin_tables
Revises: 
Create Date: 2026-10-17 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_create_admin_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    # Helper: create if not exists
    def create_if_missing(table_name, create_fn):
        if not inspector.has_table(table_name):
            create_fn()

    # Users
    create_if_missing('users', lambda: op.create_table(
        'users',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False, unique=True, index=True),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True, index=True),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('avatar', sa.String(length=1024), nullable=True),
        sa.Column('level', sa.Integer, nullable=False),
        sa.Column('xp', sa.Integer, nullable=False),
        sa.Column('coins', sa.Integer, nullable=False),
        sa.Column('streak', sa.Integer, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('is_verified', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('is_premium', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('role', sa.String(length=32), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('last_login', sa.DateTime, nullable=True),
        sa.Column('submissions_count', sa.Integer, nullable=False),
        sa.Column('achievements_count', sa.Integer, nullable=False),
        sa.Column('country', sa.String(length=64), nullable=True),
        sa.Column('bio', sa.Text, nullable=True),
    ))

    # Achievements
    create_if_missing('achievements', lambda: op.create_table(
        'achievements',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, index=True),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('icon', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=False, index=True),
        sa.Column('rarity', sa.String(length=32), nullable=False),
        sa.Column('points', sa.Integer, nullable=False),
        sa.Column('coins', sa.Integer, nullable=False),
        sa.Column('xp', sa.Integer, nullable=False),
        sa.Column('requirements', sa.JSON, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('is_hidden', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('display_order', sa.Integer, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    ))

    # Challenges
    create_if_missing('challenges', lambda: op.create_table(
        'challenges',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False, index=True),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('difficulty', sa.String(length=32), nullable=False),
        sa.Column('category', sa.String(length=255), nullable=False),
        sa.Column('start_date', sa.DateTime, nullable=True),
        sa.Column('end_date', sa.DateTime, nullable=True),
        sa.Column('max_participants', sa.Integer, nullable=False),
        sa.Column('current_participants', sa.Integer, nullable=False),
        sa.Column('prize_pool', sa.Integer, nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, index=True),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('leaderboard', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('rated', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('featured', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    ))

    # Categories (self-referencing for nested topics)
    create_if_missing('categories', lambda: op.create_table(
        'categories',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, index=True),
        sa.Column('slug', sa.String(length=255), nullable=False, unique=True, index=True),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('icon', sa.String(length=255), nullable=False),
        sa.Column('color', sa.String(length=16), nullable=False),
        sa.Column('parent_id', sa.String(length=64), sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('level', sa.Integer, nullable=False),
        sa.Column('sort_order', sa.Integer, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('is_featured', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('problem_count', sa.Integer, nullable=False),
        sa.Column('avg_success_rate', sa.Float, nullable=False),
        sa.Column('total_submissions', sa.Integer, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    ))

    # Submissions
    create_if_missing('submissions', lambda: op.create_table(
        'submissions',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('problem_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('problem_title', sa.String(length=255), nullable=False),
        sa.Column('problem_difficulty', sa.String(length=32), nullable=False),
        sa.Column('problem_category', sa.String(length=255), nullable=False),
        sa.Column('code', sa.Text, nullable=False),
        sa.Column('language', sa.String(length=32), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, index=True),
        sa.Column('runtime', sa.Float, nullable=False),
        sa.Column('memory', sa.Float, nullable=False),
        sa.Column('score', sa.Float, nullable=False),
        sa.Column('test_cases_passed', sa.Integer, nullable=False),
        sa.Column('total_test_cases', sa.Integer, nullable=False),
        sa.Column('submission_time', sa.DateTime, nullable=False),
        sa.Column('execution_time', sa.Float, nullable=False),
        sa.Column('error_message', sa.Text, nullable=True),
        sa.Column('notes', sa.Text, nullable=True),
        sa.Column('is_flagged', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('plagiarism_score', sa.Float, nullable=False),
        sa.Column('optimized', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    ))

    # Leaderboard entries
    create_if_missing('leaderboard_entries', lambda: op.create_table(
        'leaderboard_entries',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('avatar', sa.String(length=1024), nullable=True),
        sa.Column('rank', sa.Integer, nullable=False, index=True),
        sa.Column('previous_rank', sa.Integer, nullable=False),
        sa.Column('score', sa.Integer, nullable=False),
        sa.Column('total_problems', sa.Integer, nullable=False),
        sa.Column('total_submissions', sa.Integer, nullable=False),
        sa.Column('accepted_submissions', sa.Integer, nullable=False),
        sa.Column('acceptance_rate', sa.Float, nullable=False),
        sa.Column('current_streak', sa.Integer, nullable=False),
        sa.Column('max_streak', sa.Integer, nullable=False),
        sa.Column('total_xp', sa.Integer, nullable=False),
        sa.Column('level', sa.Integer, nullable=False),
        sa.Column('coins', sa.Integer, nullable=False),
        sa.Column('country', sa.String(length=64), nullable=True),
        sa.Column('joined_at', sa.DateTime, nullable=True),
        sa.Column('last_active_at', sa.DateTime, nullable=True),
        sa.Column('achievements', sa.Integer, nullable=False),
    ))

    # Activity logs
    create_if_missing('activity_logs', lambda: op.create_table(
        'activity_logs',
        sa.Column('id', sa.String(length=64), primary_key=True, nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('action', sa.String(length=128), nullable=False, index=True),
        sa.Column('resource_type', sa.String(length=32), nullable=False),
        sa.Column('resource_id', sa.String(length=64), nullable=True),
        sa.Column('resource_name', sa.String(length=255), nullable=False),
        sa.Column('details', sa.JSON, nullable=False),
        sa.Column('ip_address', sa.String(length=64), nullable=True),
        sa.Column('user_agent', sa.String(length=512), nullable=True),
        sa.Column('timestamp', sa.DateTime, nullable=False),
        sa.Column('severity', sa.String(length=16), nullable=False, index=True),
        sa.Column('success', sa.Boolean, nullable=False, server_default=sa.text('true')),
    ))


def downgrade() -> None:
    op.drop_table('activity_logs')
    op.drop_table('leaderboard_entries')
    op.drop_table('submissions')
    op.drop_table('categories')
    op.drop_table('challenges')
    op.drop_table('achievements')
    op.drop_table('users')
