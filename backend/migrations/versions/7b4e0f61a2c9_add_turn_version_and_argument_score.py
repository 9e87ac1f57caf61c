"""add turn_version to debate; score to argument

Revision ID: 7b4e0f61a2c9
Revises: 3c9a7d2e1f04
Create Date: 2026-10-02 17:40:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7b4e0f61a2c9'
down_revision = '3c9a7d2e1f04'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    debate_cols = {c['name'] for c in insp.get_columns('debate')}
    with op.batch_alter_table('debate') as batch_op:
        if 'turn_version' not in debate_cols:
            batch_op.add_column(sa.Column('turn_version', sa.Integer(), nullable=False, server_default='0'))

    argument_cols = {c['name'] for c in insp.get_columns('argument')}
    with op.batch_alter_table('argument') as batch_op:
        if 'score' not in argument_cols:
            batch_op.add_column(sa.Column('score', sa.Integer(), nullable=True))


def downgrade():
    with op.batch_alter_table('argument') as batch_op:
        batch_op.drop_column('score')
    with op.batch_alter_table('debate') as batch_op:
        batch_op.drop_column('turn_version')
