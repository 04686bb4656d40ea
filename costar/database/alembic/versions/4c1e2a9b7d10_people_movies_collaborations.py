"""people, movies, credits and collaboration adjacency

Revision ID: 4c1e2a9b7d10
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '4c1e2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = 'costar'


def _service_columns():
    return [
        sa.Column('id', sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'people',
        *_service_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('tmdb_id', sa.BigInteger(), nullable=True),
        sa.Column('known_for_department', sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_people')),
        schema=SCHEMA
    )
    op.create_index('ix_people_tmdb_id', 'people', ['tmdb_id'], unique=True, schema=SCHEMA)

    op.create_table(
        'movies',
        *_service_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('tmdb_id', sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_movies')),
        schema=SCHEMA
    )
    op.create_index('ix_movies_release_date', 'movies', ['release_date'], unique=False, schema=SCHEMA)
    op.create_index('ix_movies_tmdb_id', 'movies', ['tmdb_id'], unique=True, schema=SCHEMA)

    op.create_table(
        'movie_credits',
        *_service_columns(),
        sa.Column('movie_id', sa.BigInteger(), nullable=False),
        sa.Column('person_id', sa.BigInteger(), nullable=False),
        sa.Column('credit_type', sa.Enum('cast', 'crew', name='credit_type'), nullable=False),
        sa.Column('character', sa.Text(), nullable=True),
        sa.Column('cast_order', sa.Integer(), nullable=True),
        sa.Column('department', sa.String(length=64), nullable=True),
        sa.Column('job', sa.String(length=128), nullable=True),
        sa.ForeignKeyConstraint(['movie_id'], [f'{SCHEMA}.movies.id'],
                                name=op.f('fk_movie_credits_movie_id_movies'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['person_id'], [f'{SCHEMA}.people.id'],
                                name=op.f('fk_movie_credits_person_id_people'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_movie_credits')),
        sa.UniqueConstraint('movie_id', 'person_id', 'credit_type', name='uq_movie_credits_movie_person_type'),
        schema=SCHEMA
    )
    op.create_index('ix_movie_credits_person_id', 'movie_credits', ['person_id'], unique=False, schema=SCHEMA)
    op.create_index('ix_movie_credits_movie_id', 'movie_credits', ['movie_id'], unique=False, schema=SCHEMA)

    op.create_table(
        'collaborations',
        *_service_columns(),
        sa.Column('person_a_id', sa.BigInteger(), nullable=False),
        sa.Column('person_b_id', sa.BigInteger(), nullable=False),
        sa.Column('collaboration_count', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('first_collaboration_date', sa.Date(), nullable=True),
        sa.Column('latest_collaboration_date', sa.Date(), nullable=True),
        sa.CheckConstraint('person_a_id < person_b_id', name=op.f('ck_collaborations_ordered_persons')),
        sa.ForeignKeyConstraint(['person_a_id'], [f'{SCHEMA}.people.id'],
                                name=op.f('fk_collaborations_person_a_id_people'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['person_b_id'], [f'{SCHEMA}.people.id'],
                                name=op.f('fk_collaborations_person_b_id_people'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_collaborations')),
        sa.UniqueConstraint('person_a_id', 'person_b_id', name='uq_collaborations_pair'),
        schema=SCHEMA
    )
    op.create_index('ix_collaborations_person_b_person_a', 'collaborations', ['person_b_id', 'person_a_id'],
                    unique=False, schema=SCHEMA)
    op.create_index('ix_collaborations_collaboration_count', 'collaborations', ['collaboration_count'],
                    unique=False, schema=SCHEMA)

    op.create_table(
        'collaboration_details',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('collaboration_id', sa.BigInteger(), nullable=False),
        sa.Column('movie_id', sa.BigInteger(), nullable=False),
        sa.Column('collaboration_type', sa.Enum('cast-cast', 'cast-crew', 'crew-crew', name='collaboration_type'),
                  nullable=False),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['collaboration_id'], [f'{SCHEMA}.collaborations.id'],
                                name=op.f('fk_collaboration_details_collaboration_id_collaborations'),
                                ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['movie_id'], [f'{SCHEMA}.movies.id'],
                                name=op.f('fk_collaboration_details_movie_id_movies'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_collaboration_details')),
        sa.UniqueConstraint('collaboration_id', 'movie_id', 'collaboration_type',
                            name='uq_collaboration_details_collab_movie_type'),
        schema=SCHEMA
    )
    op.create_index('ix_collaboration_details_collaboration_id', 'collaboration_details', ['collaboration_id'],
                    unique=False, schema=SCHEMA)
    op.create_index('ix_collaboration_details_movie_id', 'collaboration_details', ['movie_id'],
                    unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_table('collaboration_details', schema=SCHEMA)
    op.drop_table('collaborations', schema=SCHEMA)
    op.drop_table('movie_credits', schema=SCHEMA)
    op.drop_table('movies', schema=SCHEMA)
    op.drop_table('people', schema=SCHEMA)
    op.execute("DROP TYPE IF EXISTS collaboration_type")
    op.execute("DROP TYPE IF EXISTS credit_type")
