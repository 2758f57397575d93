"""initial catalogue: media, people, companies and their links

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from medialibrary.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema

# (table, target table, target column)
LINK_TABLES = (
    ('video_main_actors', 'people', 'actor_id'),
    ('video_directors', 'people', 'director_id'),
    ('video_producers', 'people', 'producer_id'),
    ('book_authors', 'people', 'author_id'),
    ('book_publishers', 'companies', 'publisher_id'),
    ('comic_illustrators', 'people', 'illustrator_id'),
    ('video_game_developers', 'companies', 'developer_id'),
    ('video_game_publishers', 'companies', 'publisher_id'),
    ('album_label_records', 'companies', 'label_records_id'),
    ('album_singers', 'people', 'singer_id'),
)


def _ref(table: str) -> str:
    return f'{SCHEMA}.{table}' if SCHEMA else table


def _service_columns() -> list:
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'people',
        *_service_columns(),
        sa.Column('person_type', sa.String(length=32), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_people')),
        sa.UniqueConstraint('person_type', 'first_name', 'last_name', name='uq_people_type_first_last'),
        schema=SCHEMA
    )
    op.create_index('ix_people_last_name', 'people', ['last_name'], unique=False, schema=SCHEMA)

    op.create_table(
        'companies',
        *_service_columns(),
        sa.Column('company_type', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_companies')),
        sa.UniqueConstraint('company_type', 'name', name='uq_companies_type_name'),
        schema=SCHEMA
    )

    op.create_table(
        'media',
        *_service_columns(),
        sa.Column('media_type', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('original_title', sa.String(length=255), nullable=True),
        sa.Column('synopsis', sa.Text(), nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('genres', sa.JSON(), nullable=False),
        sa.Column('supports', sa.JSON(), nullable=False),
        # video
        sa.Column('languages_spoken', sa.JSON(), nullable=True),
        sa.Column('subtitles', sa.JSON(), nullable=True),
        sa.Column('runtime', sa.Integer(), nullable=True),
        sa.Column('number_of_seasons', sa.Integer(), nullable=True),
        sa.Column('current_season', sa.Integer(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('average_episode_runtime', sa.Integer(), nullable=True),
        sa.Column('number_of_episodes', sa.Integer(), nullable=True),
        sa.Column('max_episodes', sa.Integer(), nullable=True),
        # books
        sa.Column('isbn', sa.String(length=32), nullable=True),
        sa.Column('nb_pages', sa.Integer(), nullable=True),
        sa.Column('format', sa.Enum('CLASSICAL', 'POCKET', 'UNSPECIFIED', name='book_format',
                                    native_enum=False, length=32), nullable=True),
        sa.Column('volumes', sa.Integer(), nullable=True),
        sa.Column('current_volume', sa.Integer(), nullable=True),
        # games
        sa.Column('platforms', sa.JSON(), nullable=True),
        sa.Column('multiplayer', sa.Boolean(), nullable=True),
        sa.Column('languages', sa.JSON(), nullable=True),
        # music
        sa.Column('nb_tracks', sa.Integer(), nullable=True),
        sa.Column('length', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_media')),
        schema=SCHEMA
    )
    op.create_index('ix_media_type_title', 'media', ['media_type', 'title'], unique=False, schema=SCHEMA)

    for name, target, column in LINK_TABLES:
        op.create_table(
            name,
            sa.Column('media_id', sa.Integer(), nullable=False),
            sa.Column(column, sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['media_id'], [f"{_ref('media')}.id"],
                                    name=op.f(f'fk_{name}_media_id_media'), ondelete='CASCADE'),
            sa.ForeignKeyConstraint([column], [f'{_ref(target)}.id'],
                                    name=op.f(f'fk_{name}_{column}_{target}'), ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('media_id', column, name=op.f(f'pk_{name}')),
            schema=SCHEMA
        )


def downgrade() -> None:
    for name, _, _ in reversed(LINK_TABLES):
        op.drop_table(name, schema=SCHEMA)
    op.drop_index('ix_media_type_title', table_name='media', schema=SCHEMA)
    op.drop_table('media', schema=SCHEMA)
    op.drop_table('companies', schema=SCHEMA)
    op.drop_index('ix_people_last_name', table_name='people', schema=SCHEMA)
    op.drop_table('people', schema=SCHEMA)
