# medialibrary/database/models/__init__.py

from medialibrary.database.core.main import Base
from medialibrary.database.models.person import (
    Person,
    Actor,
    Director,
    Producer,
    Author,
    Illustrator,
    Singer,
)
from medialibrary.database.models.company import (
    Company,
    Publisher,
    Developer,
    LabelRecords,
)
from medialibrary.database.models.media import (
    Media,
    Video,
    Movie,
    Cartoon,
    Serial,
    Series,
    Anime,
    Book,
    Comic,
    VideoGame,
    Album,
)

__all__ = [
    "Base",
    "Person",
    "Actor",
    "Director",
    "Producer",
    "Author",
    "Illustrator",
    "Singer",
    "Company",
    "Publisher",
    "Developer",
    "LabelRecords",
    "Media",
    "Video",
    "Movie",
    "Cartoon",
    "Serial",
    "Series",
    "Anime",
    "Book",
    "Comic",
    "VideoGame",
    "Album",
]
