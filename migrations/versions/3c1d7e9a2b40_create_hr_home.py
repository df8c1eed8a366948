"""create_hr_home_table

Revision ID: 3c1d7e9a2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1d7e9a2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    # Existing deployments already have the table from the previous gateway
    if inspector.has_table("hr_home"):
        return

    op.create_table(
        'hr_home',
        sa.Column('UID', sa.Text(), nullable=False),
        sa.Column('Email', sa.Text(), nullable=False),
        sa.Column('time', sa.String(length=19), nullable=False),
        sa.Column('JD', sa.LargeBinary(), nullable=True),
        sa.Column('CV', sa.LargeBinary(), nullable=True),
        sa.Column('status', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('Active', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('status IN (0,1)', name='ck_hr_home_status'),
        sa.CheckConstraint('Active IN (0,1)', name='ck_hr_home_active'),
        sa.PrimaryKeyConstraint('UID'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('hr_home')
