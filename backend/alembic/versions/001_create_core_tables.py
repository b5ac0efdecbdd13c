"""create farms, monitoring, recommendation, help-ticket and appointment tables

Revision ID: 001_create_core_tables
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '001_create_core_tables'
down_revision: Union[str, Sequence[str], None] = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # --- Farms ---
    op.create_table(
        'farms',
        sa.Column('id', sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column('user_id', sa.Uuid(as_uuid=False), nullable=False),
        sa.Column('farm_name', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('area_size', sa.Float(), nullable=True),
        sa.Column('soil_type', sa.String(length=6), nullable=True),
        sa.Column('crop_type', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_farms_user_id', 'farms', ['user_id'])

    # --- Monitoring readings ---
    op.create_table(
        'monitoring_data',
        sa.Column('id', sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column('farm_id', sa.Uuid(as_uuid=False), nullable=False),
        sa.Column('recorded_at', sa.DateTime(), nullable=True),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('humidity', sa.Float(), nullable=True),
        sa.Column('soil_moisture', sa.Float(), nullable=True),
        sa.Column('soil_ph', sa.Float(), nullable=True),
        sa.Column('nitrogen', sa.Integer(), nullable=True),
        sa.Column('phosphorus', sa.Integer(), nullable=True),
        sa.Column('potassium', sa.Integer(), nullable=True),
        sa.Column('weather_condition', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'])
    )
    op.create_index('ix_monitoring_data_farm_id', 'monitoring_data', ['farm_id'])
    op.create_index('ix_monitoring_data_recorded_at', 'monitoring_data', ['recorded_at'])

    # --- Recommendations ---
    op.create_table(
        'recommendations',
        sa.Column('id', sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column('farm_id', sa.Uuid(as_uuid=False), nullable=False),
        sa.Column('recommendation_type', sa.String(length=12), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('confidence_score', sa.Float(), nullable=True),
        sa.Column('created_by', sa.Uuid(as_uuid=False), nullable=True),
        sa.Column('status', sa.String(length=8), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('batch_index', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'])
    )
    op.create_index('ix_recommendations_farm_id', 'recommendations', ['farm_id'])
    op.create_index('ix_recommendations_created_at', 'recommendations', ['created_at'])

    # --- Help tickets ---
    op.create_table(
        'help_tickets',
        sa.Column('id', sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column('user_id', sa.Uuid(as_uuid=False), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('priority', sa.String(length=6), nullable=True),
        sa.Column('status', sa.String(length=11), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_help_tickets_user_id', 'help_tickets', ['user_id'])

    # --- Expert appointments ---
    op.create_table(
        'expert_appointments',
        sa.Column('id', sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column('farmer_id', sa.Uuid(as_uuid=False), nullable=False),
        sa.Column('farm_id', sa.Uuid(as_uuid=False), nullable=False),
        sa.Column('expert_id', sa.Uuid(as_uuid=False), nullable=True),
        sa.Column('appointment_date', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=9), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'])
    )
    op.create_index('ix_expert_appointments_farmer_id', 'expert_appointments', ['farmer_id'])
    op.create_index('ix_expert_appointments_farm_id', 'expert_appointments', ['farm_id'])
    op.create_index('ix_expert_appointments_created_at', 'expert_appointments', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_expert_appointments_created_at', table_name='expert_appointments')
    op.drop_index('ix_expert_appointments_farm_id', table_name='expert_appointments')
    op.drop_index('ix_expert_appointments_farmer_id', table_name='expert_appointments')
    op.drop_table('expert_appointments')
    op.drop_index('ix_help_tickets_user_id', table_name='help_tickets')
    op.drop_table('help_tickets')
    op.drop_index('ix_recommendations_created_at', table_name='recommendations')
    op.drop_index('ix_recommendations_farm_id', table_name='recommendations')
    op.drop_table('recommendations')
    op.drop_index('ix_monitoring_data_recorded_at', table_name='monitoring_data')
    op.drop_index('ix_monitoring_data_farm_id', table_name='monitoring_data')
    op.drop_table('monitoring_data')
    op.drop_index('ix_farms_user_id', table_name='farms')
    op.drop_table('farms')
