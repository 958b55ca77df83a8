"""create board, status, task and subtask tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-17 09:12:40.418236

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'boards',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'board_statuses',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('board_id', sa.Uuid(), sa.ForeignKey('boards.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_board_statuses_board_id', 'board_statuses', ['board_id'])
    op.create_table(
        'tasks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('board_status_id', sa.Uuid(), sa.ForeignKey('board_statuses.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_tasks_board_status_id', 'tasks', ['board_status_id'])
    op.create_table(
        'sub_tasks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('task_id', sa.Uuid(), sa.ForeignKey('tasks.id', ondelete='CASCADE'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('ix_sub_tasks_task_id', 'sub_tasks', ['task_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_sub_tasks_task_id', table_name='sub_tasks')
    op.drop_table('sub_tasks')
    op.drop_index('ix_tasks_board_status_id', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('ix_board_statuses_board_id', table_name='board_statuses')
    op.drop_table('board_statuses')
    op.drop_table('boards')
