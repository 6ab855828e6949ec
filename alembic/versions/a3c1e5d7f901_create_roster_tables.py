"""Create students, classes and class_assignments tables

Revision ID: a3c1e5d7f901
Revises:
Create Date: 2025-07-15 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3c1e5d7f901'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the two entity tables and the assignment table linking them."""
    op.create_table(
        'students',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('first_name', sa.String(length=64), nullable=False),
        sa.Column('last_name', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_students_last_name', 'students', ['last_name'])

    op.create_table(
        'classes',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_classes_name', 'classes', ['name'])

    op.create_table(
        'class_assignments',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('student_id', sa.String(length=36), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('class_id', sa.String(length=36), sa.ForeignKey('classes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('student_id', 'class_id', name='uq_class_assignments_student_class'),
    )
    op.create_index('ix_class_assignments_class_id', 'class_assignments', ['class_id'])


def downgrade() -> None:
    """Drop the roster tables, assignments first."""
    op.drop_index('ix_class_assignments_class_id', table_name='class_assignments')
    op.drop_table('class_assignments')
    op.drop_index('ix_classes_name', table_name='classes')
    op.drop_table('classes')
    op.drop_index('ix_students_last_name', table_name='students')
    op.drop_table('students')
