"""initial schema

Revision ID: e001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'e001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the tracker tables.

    Tables:
    1. users
    2. activities (FK users)
    3. events (FK users as organizer)
    4. registrations (FK users; event_id is deliberately unconstrained)
    5. badge_definitions
    """
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('role', sa.String(length=20), server_default='user', nullable=False),
        sa.Column('green_points', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('badges', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'activities',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('location', sa.JSON(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('carbon_saved_estimate_kg', sa.Float(), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('admin_comment', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_activities_user_id', 'activities', ['user_id'], unique=False)
    op.create_index('ix_activities_status', 'activities', ['status'], unique=False)

    op.create_table(
        'events',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('organizer_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('registration_deadline', sa.DateTime(timezone=True), nullable=True),
        sa.Column('location', sa.JSON(), nullable=False),
        sa.Column('max_participants', sa.Integer(), nullable=False),
        sa.Column('approved_count', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('points_reward', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('carbon_saved_estimate_kg', sa.Float(), nullable=False),
        sa.Column('category', sa.String(length=32), server_default='other', nullable=False),
        sa.Column('status', sa.String(length=20), server_default='draft', nullable=False),
        sa.Column('auto_approve_registrations', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('requires_skills', sa.JSON(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('requirements', sa.String(), nullable=True),
        sa.Column('what_to_bring', sa.String(), nullable=True),
        sa.Column('contact_info', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['organizer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_organizer_id', 'events', ['organizer_id'], unique=False)
    op.create_index('ix_events_date_status', 'events', ['date', 'status'], unique=False)
    op.create_index('ix_events_category_status', 'events', ['category', 'status'], unique=False)

    op.create_table(
        'registrations',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('event_id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('registered_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('checked_in_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('emergency_contact', sa.JSON(), nullable=True),
        sa.Column('dietary_restrictions', sa.String(), nullable=True),
        sa.Column('tshirt_size', sa.String(length=4), nullable=True),
        sa.Column('volunteer_role', sa.String(), nullable=True),
        sa.Column('points_awarded', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('points_awarded_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('admin_comment', sa.String(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_id', 'user_id', name='uq_registration_event_user'),
    )
    op.create_index('ix_registrations_event_id', 'registrations', ['event_id'], unique=False)
    op.create_index('ix_registrations_user_id', 'registrations', ['user_id'], unique=False)
    op.create_index('ix_registrations_event_status', 'registrations', ['event_id', 'status'], unique=False)
    op.create_index('ix_registrations_user_status', 'registrations', ['user_id', 'status'], unique=False)

    op.create_table(
        'badge_definitions',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('criteria', sa.String(), nullable=True),
        sa.Column('required_points', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )


def downgrade() -> None:
    """Drop all tracker tables"""
    op.drop_table('badge_definitions')
    op.drop_index('ix_registrations_user_status', table_name='registrations')
    op.drop_index('ix_registrations_event_status', table_name='registrations')
    op.drop_index('ix_registrations_user_id', table_name='registrations')
    op.drop_index('ix_registrations_event_id', table_name='registrations')
    op.drop_table('registrations')
    op.drop_index('ix_events_category_status', table_name='events')
    op.drop_index('ix_events_date_status', table_name='events')
    op.drop_index('ix_events_organizer_id', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_activities_status', table_name='activities')
    op.drop_index('ix_activities_user_id', table_name='activities')
    op.drop_table('activities')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
