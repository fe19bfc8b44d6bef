"""Initial schema

Revision ID: 0000_initial
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0000_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'types',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.UniqueConstraint('name', name='uq_types_name'),
    )
    op.create_index('ix_types_name', 'types', ['name'], unique=False)

    op.create_table(
        'owners',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=80), nullable=False),
        sa.Column('telephone', sa.String(length=20), nullable=False),
    )
    op.create_index('ix_owners_last_name', 'owners', ['last_name'], unique=False)

    op.create_table(
        'pets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=30), nullable=False),
        sa.Column('birth_date', sa.Date()),
        sa.Column('type_id', sa.Integer(), sa.ForeignKey('types.id'), nullable=False),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('owners.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_pets_type_id', 'pets', ['type_id'], unique=False)
    op.create_index('ix_pets_owner_id', 'pets', ['owner_id'], unique=False)

    op.create_table(
        'visits',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('visit_date', sa.Date(), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('pet_id', sa.Integer(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_visits_pet_id', 'visits', ['pet_id'], unique=False)

    op.create_table(
        'specialties',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.UniqueConstraint('name', name='uq_specialties_name'),
    )

    op.create_table(
        'vets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
    )
    op.create_index('ix_vets_last_name', 'vets', ['last_name'], unique=False)

    op.create_table(
        'vet_specialties',
        sa.Column('vet_id', sa.Integer(), sa.ForeignKey('vets.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('specialty_id', sa.Integer(), sa.ForeignKey('specialties.id', ondelete='CASCADE'), primary_key=True),
    )


def downgrade():
    op.drop_table('vet_specialties')
    op.drop_index('ix_vets_last_name', table_name='vets')
    op.drop_table('vets')
    op.drop_table('specialties')
    op.drop_index('ix_visits_pet_id', table_name='visits')
    op.drop_table('visits')
    op.drop_index('ix_pets_owner_id', table_name='pets')
    op.drop_index('ix_pets_type_id', table_name='pets')
    op.drop_table('pets')
    op.drop_index('ix_owners_last_name', table_name='owners')
    op.drop_table('owners')
    op.drop_index('ix_types_name', table_name='types')
    op.drop_table('types')
