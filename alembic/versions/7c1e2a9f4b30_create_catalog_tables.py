"""create catalog tables

Revision ID: 7c1e2a9f4b30
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1e2a9f4b30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_by_user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('last_modified_by_user_id', sa.Integer(), nullable=True),
        sa.Column('last_modified_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    # Lookup catalogs
    for table in ('classifications', 'genres'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(100), nullable=False),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        )

    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('classification_id', sa.Integer(), sa.ForeignKey('classifications.id'), nullable=True),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genres.id'), nullable=True),
        sa.Column('director_name', sa.String(200), nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('release_hour', sa.Time(), nullable=True),
        sa.Column('synopsis', sa.Text(), nullable=True),
        sa.Column('image_name', sa.String(255), nullable=True),
        sa.Column('image_extension', sa.String(20), nullable=True),
        sa.Column('image_bytes', sa.Text(), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_movies_is_active', 'movies', ['is_active'])
    op.create_index('ix_movie_active_created', 'movies', ['is_active', 'created_at'])

    op.create_table(
        'actors_in_movies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('movie_id', sa.Integer(), sa.ForeignKey('movies.id'), nullable=False),
        *_audit_columns(),
    )
    op.create_index('ix_actors_in_movies_movie_id', 'actors_in_movies', ['movie_id'])
    op.create_index('ix_actors_in_movies_is_active', 'actors_in_movies', ['is_active'])

    op.create_table(
        'movies_by_screens',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('movie_id', sa.Integer(), sa.ForeignKey('movies.id'), nullable=False),
        sa.Column('screen_id', sa.Integer(), nullable=False),
        sa.Column('show_date', sa.Date(), nullable=True),
        sa.Column('show_hour', sa.Time(), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_movies_by_screens_screen_id', 'movies_by_screens', ['screen_id'])
    op.create_index('ix_movies_by_screens_is_active', 'movies_by_screens', ['is_active'])
    op.create_index('ix_movie_by_screen_movie_active', 'movies_by_screens', ['movie_id', 'is_active'])


def downgrade() -> None:
    op.drop_index('ix_movie_by_screen_movie_active', table_name='movies_by_screens')
    op.drop_index('ix_movies_by_screens_is_active', table_name='movies_by_screens')
    op.drop_index('ix_movies_by_screens_screen_id', table_name='movies_by_screens')
    op.drop_table('movies_by_screens')

    op.drop_index('ix_actors_in_movies_is_active', table_name='actors_in_movies')
    op.drop_index('ix_actors_in_movies_movie_id', table_name='actors_in_movies')
    op.drop_table('actors_in_movies')

    op.drop_index('ix_movie_active_created', table_name='movies')
    op.drop_index('ix_movies_is_active', table_name='movies')
    op.drop_table('movies')

    op.drop_table('genres')
    op.drop_table('classifications')
