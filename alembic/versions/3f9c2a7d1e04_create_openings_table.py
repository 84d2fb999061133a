"""Create openings table

Revision ID: 3f9c2a7d1e04
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2a7d1e04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'openings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('remote', sa.Boolean(), nullable=False),
        sa.Column('link', sa.String(), nullable=True),
        sa.Column('salary', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_openings_id'), 'openings', ['id'], unique=False)
    op.create_index(op.f('ix_openings_role'), 'openings', ['role'], unique=False)
    op.create_index(op.f('ix_openings_company'), 'openings', ['company'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_openings_company'), table_name='openings')
    op.drop_index(op.f('ix_openings_role'), table_name='openings')
    op.drop_index(op.f('ix_openings_id'), table_name='openings')
    op.drop_table('openings')
