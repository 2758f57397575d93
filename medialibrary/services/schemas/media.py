# medialibrary/services/schemas/media.py
from __future__ import annotations

from datetime import date
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints

from medialibrary.domain.enums import BookFormat, MediaGenre, MediaSupport, VideoGamePlatform
from medialibrary.services.schemas.companies import CompanyIn, CompanyRead
from medialibrary.services.schemas.people import PersonIn, PersonRead


def _lower_code(v: Any) -> Any:
    return v.strip().lower() if isinstance(v, str) else v


# ISO 639-1 ("en", "fr", "ja", ...)
LanguageCode = Annotated[str, BeforeValidator(_lower_code), StringConstraints(pattern=r"^[a-z]{2}$")]


# ---------- Shared bases ----------

class MediaBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    original_title: Optional[str] = Field(None, max_length=255)
    synopsis: Optional[str] = None
    release_date: Optional[date] = None
    genres: List[MediaGenre] = Field(default_factory=list)
    supports: List[MediaSupport] = Field(default_factory=list)


class VideoBase(MediaBase):
    languages_spoken: List[LanguageCode] = Field(default_factory=list)
    subtitles: List[LanguageCode] = Field(default_factory=list)
    directors: List[PersonIn] = Field(default_factory=list)
    producers: List[PersonIn] = Field(default_factory=list)


class SeasonFields(BaseModel):
    number_of_seasons: Optional[int] = Field(None, ge=0)
    current_season: Optional[int] = Field(None, ge=0)
    end_date: Optional[date] = None
    average_episode_runtime: Optional[int] = Field(None, ge=0)
    number_of_episodes: Optional[int] = Field(None, ge=0)
    max_episodes: Optional[int] = Field(None, ge=0)


# ---------- Create (request bodies) ----------

class MovieCreate(VideoBase):
    runtime: Optional[int] = Field(None, ge=0, description="minutes")
    main_actors: List[PersonIn] = Field(default_factory=list)


class SeriesCreate(VideoBase, SeasonFields):
    main_actors: List[PersonIn] = Field(default_factory=list)


class AnimeCreate(VideoBase, SeasonFields):
    pass


class CartoonCreate(VideoBase):
    runtime: Optional[int] = Field(None, ge=0, description="minutes")


class BookCreate(MediaBase):
    isbn: Optional[str] = Field(None, max_length=32)
    nb_pages: Optional[int] = Field(None, ge=0)
    format: Optional[BookFormat] = None
    authors: List[PersonIn] = Field(default_factory=list)
    publishers: List[CompanyIn] = Field(default_factory=list)


class ComicCreate(BookCreate):
    volumes: Optional[int] = Field(None, ge=0)
    current_volume: Optional[int] = Field(None, ge=0)
    illustrators: List[PersonIn] = Field(default_factory=list)


class VideoGameCreate(MediaBase):
    platforms: List[VideoGamePlatform] = Field(default_factory=list)
    multiplayer: bool = False
    languages: List[LanguageCode] = Field(default_factory=list)
    developers: List[CompanyIn] = Field(default_factory=list)
    publishers: List[CompanyIn] = Field(default_factory=list)


class AlbumCreate(MediaBase):
    nb_tracks: Optional[int] = Field(None, ge=0)
    length: Optional[float] = Field(None, ge=0, description="minutes")
    label_records: List[CompanyIn] = Field(default_factory=list)
    singers: List[PersonIn] = Field(default_factory=list)


# ---------- Read (responses) ----------

class MovieRead(MovieCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    directors: List[PersonRead] = Field(default_factory=list)
    producers: List[PersonRead] = Field(default_factory=list)
    main_actors: List[PersonRead] = Field(default_factory=list)


class SeriesRead(SeriesCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    directors: List[PersonRead] = Field(default_factory=list)
    producers: List[PersonRead] = Field(default_factory=list)
    main_actors: List[PersonRead] = Field(default_factory=list)


class AnimeRead(AnimeCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    directors: List[PersonRead] = Field(default_factory=list)
    producers: List[PersonRead] = Field(default_factory=list)


class CartoonRead(CartoonCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    directors: List[PersonRead] = Field(default_factory=list)
    producers: List[PersonRead] = Field(default_factory=list)


class BookRead(BookCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    authors: List[PersonRead] = Field(default_factory=list)
    publishers: List[CompanyRead] = Field(default_factory=list)


class ComicRead(ComicCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    authors: List[PersonRead] = Field(default_factory=list)
    publishers: List[CompanyRead] = Field(default_factory=list)
    illustrators: List[PersonRead] = Field(default_factory=list)


class VideoGameRead(VideoGameCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    developers: List[CompanyRead] = Field(default_factory=list)
    publishers: List[CompanyRead] = Field(default_factory=list)


class AlbumRead(AlbumCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    label_records: List[CompanyRead] = Field(default_factory=list)
    singers: List[PersonRead] = Field(default_factory=list)


# ---------- Home page / catalogue ----------

class HomePage(BaseModel):
    """Latest items of every media type."""
    model_config = ConfigDict(populate_by_name=True)

    animes: List[AnimeRead] = Field(default_factory=list)
    cartoons: List[CartoonRead] = Field(default_factory=list)
    movies: List[MovieRead] = Field(default_factory=list)
    series: List[SeriesRead] = Field(default_factory=list)
    books: List[BookRead] = Field(default_factory=list)
    comics: List[ComicRead] = Field(default_factory=list)
    musics: List[AlbumRead] = Field(default_factory=list)
    video_games: List[VideoGameRead] = Field(default_factory=list, alias="video-games")


class EnumEntry(BaseModel):
    value: str
    label: str
