from medialibrary.domain.enums.labelled import LabelledEnum
from medialibrary.domain.enums.media_genre import MediaGenre, VIDEO_GENRES
from medialibrary.domain.enums.media_support import MediaSupport
from medialibrary.domain.enums.book_format import BookFormat
from medialibrary.domain.enums.video_game_platform import VideoGamePlatform
from medialibrary.domain.enums.media_type import MediaType, PersonType, CompanyType

__all__ = [
    "LabelledEnum",
    "MediaGenre",
    "VIDEO_GENRES",
    "MediaSupport",
    "BookFormat",
    "VideoGamePlatform",
    "MediaType",
    "PersonType",
    "CompanyType",
]
