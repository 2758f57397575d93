# medialibrary/database/models/media.py
from __future__ import annotations

from datetime import date
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import (
    JSON, Boolean, Column, Date, Enum as SAEnum, Float, ForeignKey, Index,
    Integer, String, Table, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from medialibrary.database.core.main import Base, table_name
from medialibrary.database.core.service_object import ServiceObject
from medialibrary.domain.enums import BookFormat, MediaType

if TYPE_CHECKING:
    from .person import Actor, Author, Director, Illustrator, Producer, Singer
    from .company import Developer, LabelRecords, Publisher


def _link_table(name: str, target_table: str, target_col: str) -> Table:
    """media <-> people/companies association table; rows go away with either side."""
    return Table(
        name,
        Base.metadata,
        Column(
            "media_id",
            ForeignKey(f"{table_name('media')}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            target_col,
            ForeignKey(f"{table_name(target_table)}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


video_main_actors = _link_table("video_main_actors", "people", "actor_id")
video_directors = _link_table("video_directors", "people", "director_id")
video_producers = _link_table("video_producers", "people", "producer_id")
book_authors = _link_table("book_authors", "people", "author_id")
book_publishers = _link_table("book_publishers", "companies", "publisher_id")
comic_illustrators = _link_table("comic_illustrators", "people", "illustrator_id")
video_game_developers = _link_table("video_game_developers", "companies", "developer_id")
video_game_publishers = _link_table("video_game_publishers", "companies", "publisher_id")
album_label_records = _link_table("album_label_records", "companies", "label_records_id")
album_singers = _link_table("album_singers", "people", "singer_id")


# =======================
# Media (single table)
# =======================
class Media(ServiceObject, Base):
    __tablename__ = "media"
    __table_args__ = (
        Index("ix_media_type_title", "media_type", "title"),
    )

    media_type: Mapped[str] = mapped_column(String(32), nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    original_title: Mapped[Optional[str]] = mapped_column(String(255))
    synopsis: Mapped[Optional[str]] = mapped_column(Text)
    release_date: Mapped[Optional[date]] = mapped_column(Date)

    # enum codes (MediaGenre / MediaSupport values)
    genres: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    supports: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    __mapper_args__ = {
        "polymorphic_on": "media_type",
        "polymorphic_abstract": True,
    }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} title={self.title!r}>"


# ---- video ----

class Video(Media):
    # ISO 639-1 codes
    languages_spoken: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list)
    subtitles: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list)

    directors: Mapped[List["Director"]] = relationship(
        "Director", secondary=video_directors, lazy="selectin"
    )
    producers: Mapped[List["Producer"]] = relationship(
        "Producer", secondary=video_producers, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_abstract": True}


class Movie(Video):
    runtime: Mapped[Optional[int]] = mapped_column(Integer, use_existing_column=True)

    main_actors: Mapped[List["Actor"]] = relationship(
        "Actor", secondary=video_main_actors, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_identity": MediaType.movie.value}


class Cartoon(Video):
    runtime: Mapped[Optional[int]] = mapped_column(Integer, use_existing_column=True)

    __mapper_args__ = {"polymorphic_identity": MediaType.cartoon.value}


class Serial(Video):
    """Shared season/episode columns of series and anime."""
    number_of_seasons: Mapped[Optional[int]] = mapped_column(Integer)
    current_season: Mapped[Optional[int]] = mapped_column(Integer)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    average_episode_runtime: Mapped[Optional[int]] = mapped_column(Integer)
    number_of_episodes: Mapped[Optional[int]] = mapped_column(Integer)
    max_episodes: Mapped[Optional[int]] = mapped_column(Integer)

    __mapper_args__ = {"polymorphic_abstract": True}


class Series(Serial):
    main_actors: Mapped[List["Actor"]] = relationship(
        "Actor", secondary=video_main_actors, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_identity": MediaType.series.value}


class Anime(Serial):
    __mapper_args__ = {"polymorphic_identity": MediaType.anime.value}


# ---- books ----

class Book(Media):
    isbn: Mapped[Optional[str]] = mapped_column(String(32))
    nb_pages: Mapped[Optional[int]] = mapped_column(Integer)
    format: Mapped[Optional[BookFormat]] = mapped_column(
        SAEnum(BookFormat, name="book_format", native_enum=False, length=32)
    )

    authors: Mapped[List["Author"]] = relationship(
        "Author", secondary=book_authors, lazy="selectin"
    )
    publishers: Mapped[List["Publisher"]] = relationship(
        "Publisher", secondary=book_publishers, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_identity": MediaType.book.value}


class Comic(Book):
    volumes: Mapped[Optional[int]] = mapped_column(Integer)
    current_volume: Mapped[Optional[int]] = mapped_column(Integer)

    illustrators: Mapped[List["Illustrator"]] = relationship(
        "Illustrator", secondary=comic_illustrators, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_identity": MediaType.comic.value}


# ---- games ----

class VideoGame(Media):
    platforms: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list)
    multiplayer: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    languages: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list)

    developers: Mapped[List["Developer"]] = relationship(
        "Developer", secondary=video_game_developers, lazy="selectin"
    )
    publishers: Mapped[List["Publisher"]] = relationship(
        "Publisher", secondary=video_game_publishers, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_identity": MediaType.video_game.value}


# ---- music ----

class Album(Media):
    nb_tracks: Mapped[Optional[int]] = mapped_column(Integer)
    # minutes
    length: Mapped[Optional[float]] = mapped_column(Float)

    label_records: Mapped[List["LabelRecords"]] = relationship(
        "LabelRecords", secondary=album_label_records, lazy="selectin"
    )
    singers: Mapped[List["Singer"]] = relationship(
        "Singer", secondary=album_singers, lazy="selectin"
    )

    __mapper_args__ = {"polymorphic_identity": MediaType.album.value}
