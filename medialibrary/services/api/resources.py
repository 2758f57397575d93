# medialibrary/services/api/resources.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Type

from pydantic import BaseModel

from medialibrary.database.models import (
    Actor, Album, Anime, Author, Book, Cartoon, Comic, Developer, Director,
    Illustrator, LabelRecords, Media, Movie, Producer, Publisher, Series,
    Singer, VideoGame,
)
from medialibrary.services.linking.resolver import RelatedField
from medialibrary.services.schemas.media import (
    AlbumCreate, AlbumRead, AnimeCreate, AnimeRead, BookCreate, BookRead,
    CartoonCreate, CartoonRead, ComicCreate, ComicRead, MovieCreate, MovieRead,
    SeriesCreate, SeriesRead, VideoGameCreate, VideoGameRead,
)


@dataclass(frozen=True)
class MediaResource:
    """Everything the CRUD router needs to know about one media type."""
    slug: str                      # URL segment under the API prefix
    label: str                     # used in log lines and error details
    model: Type[Media]
    create_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    home_key: str
    # natural key = title (case-insensitive) + these exact fields
    key_fields: Tuple[str, ...] = ()
    related: Tuple[RelatedField, ...] = field(default_factory=tuple)
    # extra "search/title/{title}/{number}" lookup on this field
    search_field: Optional[str] = None


_VIDEO = (
    RelatedField("directors", Director),
    RelatedField("producers", Producer),
)

MOVIES = MediaResource(
    slug="movies",
    label="Movie",
    model=Movie,
    create_schema=MovieCreate,
    read_schema=MovieRead,
    home_key="movies",
    key_fields=("runtime", "release_date"),
    related=_VIDEO + (RelatedField("main_actors", Actor),),
)

SERIES = MediaResource(
    slug="series",
    label="Series",
    model=Series,
    create_schema=SeriesCreate,
    read_schema=SeriesRead,
    home_key="series",
    key_fields=("current_season",),
    related=_VIDEO + (RelatedField("main_actors", Actor),),
    search_field="current_season",
)

ANIMES = MediaResource(
    slug="animes",
    label="Anime",
    model=Anime,
    create_schema=AnimeCreate,
    read_schema=AnimeRead,
    home_key="animes",
    key_fields=("current_season",),
    related=_VIDEO,
    search_field="current_season",
)

CARTOONS = MediaResource(
    slug="cartoons",
    label="Cartoon",
    model=Cartoon,
    create_schema=CartoonCreate,
    read_schema=CartoonRead,
    home_key="cartoons",
    related=_VIDEO,
)

BOOKS = MediaResource(
    slug="books",
    label="Book",
    model=Book,
    create_schema=BookCreate,
    read_schema=BookRead,
    home_key="books",
    related=(
        RelatedField("authors", Author),
        RelatedField("publishers", Publisher),
    ),
)

COMICS = MediaResource(
    slug="comics",
    label="Comic",
    model=Comic,
    create_schema=ComicCreate,
    read_schema=ComicRead,
    home_key="comics",
    key_fields=("current_volume",),
    related=(
        RelatedField("authors", Author),
        RelatedField("publishers", Publisher),
        RelatedField("illustrators", Illustrator),
    ),
    search_field="current_volume",
)

VIDEO_GAMES = MediaResource(
    slug="video-games",
    label="Video game",
    model=VideoGame,
    create_schema=VideoGameCreate,
    read_schema=VideoGameRead,
    home_key="video-games",
    related=(
        RelatedField("developers", Developer),
        RelatedField("publishers", Publisher),
    ),
)

MUSIC = MediaResource(
    slug="music",
    label="Album",
    model=Album,
    create_schema=AlbumCreate,
    read_schema=AlbumRead,
    home_key="musics",
    related=(
        RelatedField("label_records", LabelRecords),
        RelatedField("singers", Singer),
    ),
)

MEDIA_RESOURCES: Tuple[MediaResource, ...] = (
    MOVIES, SERIES, ANIMES, CARTOONS, BOOKS, COMICS, VIDEO_GAMES, MUSIC,
)
