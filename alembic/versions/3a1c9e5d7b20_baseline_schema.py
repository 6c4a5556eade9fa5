"""baseline_schema

Revision ID: 3a1c9e5d7b20
Revises: 
Create Date: 2026-10-19 09:12:41.118204

Creates users, jobs, applications and the two skill tables.
Idempotent: tables that already exist are left untouched.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3a1c9e5d7b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('password_hash', sa.String(length=255), nullable=False),
            sa.Column('role', sa.Enum('applicant', 'company', 'admin', name='user_role', native_enum=False, create_constraint=True), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
        op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    if not table_exists('applicant_skills'):
        op.create_table('applicant_skills',
            sa.Column('applicant_id', sa.String(length=36), nullable=False),
            sa.Column('skill', sa.String(length=100), nullable=False),
            sa.ForeignKeyConstraint(['applicant_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('applicant_id', 'skill')
        )

    if not table_exists('jobs'):
        op.create_table('jobs',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('company_id', sa.String(length=36), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('salary', sa.Numeric(precision=10, scale=2), nullable=True),
            sa.Column('status', sa.Enum('draft', 'open', 'closed', name='job_status', native_enum=False, create_constraint=True), server_default='draft', nullable=False),
            sa.Column('post_date', sa.DateTime(timezone=True), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_jobs_company_id'), 'jobs', ['company_id'], unique=False)
        op.create_index('idx_jobs_company_status', 'jobs', ['company_id', 'status'], unique=False)

    if not table_exists('job_skills'):
        op.create_table('job_skills',
            sa.Column('job_id', sa.String(length=36), nullable=False),
            sa.Column('skill', sa.String(length=100), nullable=False),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('job_id', 'skill')
        )

    if not table_exists('applications'):
        op.create_table('applications',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('job_id', sa.String(length=36), nullable=False),
            sa.Column('applicant_id', sa.String(length=36), nullable=False),
            sa.Column('rating', sa.Enum('unrated', 'hirable', 'wait', 'unacceptable', name='application_rating', native_enum=False, create_constraint=True), server_default='unrated', nullable=False),
            sa.Column('offer_status', sa.Enum('none', 'offered', 'accepted', 'rejected', name='offer_status', native_enum=False, create_constraint=True), server_default='none', nullable=False),
            sa.Column('apply_date', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['applicant_id'], ['users.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('job_id', 'applicant_id', name='uq_applications_job_applicant')
        )
        op.create_index(op.f('ix_applications_applicant_id'), 'applications', ['applicant_id'], unique=False)
        op.create_index(op.f('ix_applications_job_id'), 'applications', ['job_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_applications_job_id'), table_name='applications')
    op.drop_index(op.f('ix_applications_applicant_id'), table_name='applications')
    op.drop_table('applications')
    op.drop_table('job_skills')
    op.drop_index('idx_jobs_company_status', table_name='jobs')
    op.drop_index(op.f('ix_jobs_company_id'), table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('applicant_skills')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
