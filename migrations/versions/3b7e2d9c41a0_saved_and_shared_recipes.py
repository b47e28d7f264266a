"""Saved and shared recipe tables

Revision ID: 3b7e2d9c41a0
Revises:
Create Date: 2026-10-19 10:12:44.108233

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2d9c41a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'saved_recipe',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('ingredients', sa.Text(), nullable=False),
        sa.Column('servings', sa.Integer(), nullable=False, server_default='4'),
        sa.Column('batch_multiplier', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('saved_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('saved_recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_saved_recipe_name'), ['name'], unique=False)
        batch_op.create_index(batch_op.f('ix_saved_recipe_saved_at'), ['saved_at'], unique=False)

    op.create_table(
        'shared_recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('share_id', sa.String(length=16), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('ingredients', sa.Text(), nullable=False),
        sa.Column('servings', sa.Integer(), nullable=False),
        sa.Column('batch_multiplier', sa.Integer(), nullable=False),
        sa.Column('total_cost_cents', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('shared_recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_shared_recipe_share_id'), ['share_id'], unique=True)


def downgrade():
    with op.batch_alter_table('shared_recipe', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_shared_recipe_share_id'))
    op.drop_table('shared_recipe')

    with op.batch_alter_table('saved_recipe', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_saved_recipe_saved_at'))
        batch_op.drop_index(batch_op.f('ix_saved_recipe_name'))
    op.drop_table('saved_recipe')
