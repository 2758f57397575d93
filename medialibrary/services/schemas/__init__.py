from medialibrary.services.schemas.people import (
    PersonIn,
    PersonRead,
)
from medialibrary.services.schemas.companies import (
    CompanyIn,
    CompanyRead,
)
from medialibrary.services.schemas.media import (
    LanguageCode,
    MovieCreate,
    MovieRead,
    SeriesCreate,
    SeriesRead,
    AnimeCreate,
    AnimeRead,
    CartoonCreate,
    CartoonRead,
    BookCreate,
    BookRead,
    ComicCreate,
    ComicRead,
    VideoGameCreate,
    VideoGameRead,
    AlbumCreate,
    AlbumRead,
    HomePage,
    EnumEntry,
)

__all__ = [
    "PersonIn",
    "PersonRead",
    "CompanyIn",
    "CompanyRead",
    "LanguageCode",
    "MovieCreate",
    "MovieRead",
    "SeriesCreate",
    "SeriesRead",
    "AnimeCreate",
    "AnimeRead",
    "CartoonCreate",
    "CartoonRead",
    "BookCreate",
    "BookRead",
    "ComicCreate",
    "ComicRead",
    "VideoGameCreate",
    "VideoGameRead",
    "AlbumCreate",
    "AlbumRead",
    "HomePage",
    "EnumEntry",
]
