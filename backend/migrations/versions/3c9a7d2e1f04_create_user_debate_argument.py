"""create user, debate, argument and debate_participants

Revision ID: 3c9a7d2e1f04
Revises:
Create Date: 2026-09-14 10:12:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9a7d2e1f04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)

    op.create_table(
        'debate',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=256), nullable=False),
        sa.Column('debate_type', sa.String(length=16), nullable=False),
        sa.Column('author_username', sa.String(length=64), nullable=False),
        sa.Column('turn_username', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['author_username'], ['user.username']),
        sa.ForeignKeyConstraint(['turn_username'], ['user.username']),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'debate_participants',
        sa.Column('debate_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['debate_id'], ['debate.id']),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('debate_id', 'user_id'),
    )

    op.create_table(
        'argument',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_username', sa.String(length=64), nullable=False),
        sa.Column('debate_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['author_username'], ['user.username']),
        sa.ForeignKeyConstraint(['debate_id'], ['debate.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_argument_debate_id'), 'argument', ['debate_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_argument_debate_id'), table_name='argument')
    op.drop_table('argument')
    op.drop_table('debate_participants')
    op.drop_table('debate')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
