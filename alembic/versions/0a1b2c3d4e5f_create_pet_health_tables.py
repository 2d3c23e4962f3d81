"""create pet health tables

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0a1b2c3d4e5f'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'pets',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('owner_id', sa.Uuid(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('species', sa.String(20), nullable=False),
        sa.Column('breed', sa.String(100), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('weight_kg', sa.Numeric(6, 2), nullable=True),
        sa.Column('is_indoor', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('blood_group', sa.String(20), nullable=True),
        sa.Column('known_allergies', sa.Text(), nullable=True),
        sa.Column('chronic_conditions', sa.Text(), nullable=True),
        sa.Column('photo_url', sa.String(1024), nullable=True),
        sa.Column('unique_pet_id', sa.String(40), nullable=False),
        sa.Column('emergency_contact_name', sa.String(100), nullable=True),
        sa.Column('emergency_contact_phone', sa.String(20), nullable=True),
        sa.Column('vet_name', sa.String(100), nullable=True),
        sa.Column('vet_phone', sa.String(20), nullable=True),
        sa.Column('vet_email', sa.String(255), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('unique_pet_id', name='ux_pets_unique_pet_id'),
    )
    op.create_index('ix_pets_owner_id', 'pets', ['owner_id'])

    op.create_table(
        'vaccine_protocols',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('species', sa.String(20), nullable=False),
        sa.Column('vaccine_name', sa.String(100), nullable=False),
        sa.Column('is_core', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('min_age_weeks', sa.Integer(), nullable=False),
        sa.Column('max_age_weeks', sa.Integer(), nullable=True),
        sa.Column('dose_number', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('interval_weeks', sa.Integer(), nullable=True),
        sa.Column('booster_interval_months', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('idx_vaccine_protocols_species_age', 'vaccine_protocols', ['species', 'min_age_weeks'])

    op.create_table(
        'vaccinations',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('pet_id', sa.Uuid(as_uuid=True), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('owner_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('vaccine_name', sa.String(100), nullable=False),
        sa.Column('date_given', sa.Date(), nullable=False),
        sa.Column('next_due_date', sa.Date(), nullable=True),
        sa.Column('vet_name', sa.String(100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_vaccinations_owner_id', 'vaccinations', ['owner_id'])
    op.create_index('idx_vaccinations_pet_next_due', 'vaccinations', ['pet_id', 'next_due_date'])

    op.create_table(
        'pet_vaccine_schedules',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('pet_id', sa.Uuid(as_uuid=True), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('owner_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column(
            'protocol_id',
            sa.Uuid(as_uuid=True),
            sa.ForeignKey('vaccine_protocols.id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('vaccine_name', sa.String(100), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('completed_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_pet_vaccine_schedules_pet_due', 'pet_vaccine_schedules', ['pet_id', 'due_date'])
    op.create_index(
        'idx_pet_vaccine_schedules_owner_status',
        'pet_vaccine_schedules',
        ['owner_id', 'status', 'due_date'],
    )

    op.create_table(
        'health_timeline',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('pet_id', sa.Uuid(as_uuid=True), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('owner_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('event_type', sa.String(30), nullable=False),
        sa.Column('event_date', sa.Date(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('severity', sa.String(30), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_health_timeline_owner_id', 'health_timeline', ['owner_id'])
    op.create_index('idx_health_timeline_pet_date', 'health_timeline', ['pet_id', 'event_date'])

    op.create_table(
        'notification_preferences',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('owner_id', sa.Uuid(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('whatsapp_number', sa.String(20), nullable=True),
        sa.Column('whatsapp_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('email_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint('owner_id', name='ux_notification_preferences_owner'),
    )


def downgrade() -> None:
    op.drop_table('notification_preferences')
    op.drop_index('idx_health_timeline_pet_date', table_name='health_timeline')
    op.drop_index('ix_health_timeline_owner_id', table_name='health_timeline')
    op.drop_table('health_timeline')
    op.drop_index('idx_pet_vaccine_schedules_owner_status', table_name='pet_vaccine_schedules')
    op.drop_index('idx_pet_vaccine_schedules_pet_due', table_name='pet_vaccine_schedules')
    op.drop_table('pet_vaccine_schedules')
    op.drop_index('idx_vaccinations_pet_next_due', table_name='vaccinations')
    op.drop_index('ix_vaccinations_owner_id', table_name='vaccinations')
    op.drop_table('vaccinations')
    op.drop_index('idx_vaccine_protocols_species_age', table_name='vaccine_protocols')
    op.drop_table('vaccine_protocols')
    op.drop_index('ix_pets_owner_id', table_name='pets')
    op.drop_table('pets')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
