"""Create roster and effectiveness chart tables

Revision ID: 4f2a9c1e7b3d
Revises:
Create Date: 2025-10-02 18:41:07.512334

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1e7b3d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'pokemon_types',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'pokemon',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('type_id', sa.String(length=36), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('power', sa.Integer(), nullable=False),
        sa.Column('life', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('power BETWEEN 10 AND 100', name='ck_pokemon_power'),
        sa.CheckConstraint('life BETWEEN 10 AND 100', name='ck_pokemon_life'),
        sa.ForeignKeyConstraint(['type_id'], ['pokemon_types.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_pokemon_type', 'pokemon', ['type_id'])
    op.create_table(
        'teams',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'team_members',
        sa.Column('team_id', sa.String(length=36), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('pokemon_id', sa.String(length=36), nullable=False),
        sa.CheckConstraint('position >= 0 AND position < 6', name='ck_team_members_position'),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['pokemon_id'], ['pokemon.id']),
        sa.PrimaryKeyConstraint('team_id', 'position'),
    )
    op.create_index('idx_team_members_pokemon', 'team_members', ['pokemon_id'])
    op.create_table(
        'weaknesses',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('attacker_type_id', sa.String(length=36), nullable=False),
        sa.Column('defender_type_id', sa.String(length=36), nullable=False),
        sa.Column('factor', sa.Float(), nullable=False),
        sa.CheckConstraint('factor >= 0', name='ck_weaknesses_factor'),
        sa.ForeignKeyConstraint(['attacker_type_id'], ['pokemon_types.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['defender_type_id'], ['pokemon_types.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('attacker_type_id', 'defender_type_id', name='uq_weaknesses_pair'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('weaknesses')
    op.drop_index('idx_team_members_pokemon', table_name='team_members')
    op.drop_table('team_members')
    op.drop_table('teams')
    op.drop_index('idx_pokemon_type', table_name='pokemon')
    op.drop_table('pokemon')
    op.drop_table('pokemon_types')
