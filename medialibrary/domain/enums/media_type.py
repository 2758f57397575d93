from __future__ import annotations

from enum import StrEnum


class MediaType(StrEnum):
    """Discriminator values of the `media` table."""
    movie = "movie"
    series = "series"
    anime = "anime"
    cartoon = "cartoon"
    book = "book"
    comic = "comic"
    video_game = "video_game"
    album = "album"


class PersonType(StrEnum):
    actor = "actor"
    director = "director"
    producer = "producer"
    author = "author"
    illustrator = "illustrator"
    singer = "singer"


class CompanyType(StrEnum):
    publisher = "publisher"
    developer = "developer"
    label_records = "label_records"
