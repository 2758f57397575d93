# medialibrary/services/api/routers/catalog.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter

from medialibrary.common.settings import get_settings
from medialibrary.domain.enums import (
    VIDEO_GENRES,
    BookFormat,
    MediaGenre,
    MediaSupport,
    VideoGamePlatform,
)
from medialibrary.services.schemas.media import EnumEntry

cfg = get_settings()
router = APIRouter(tags=["catalog"])


@router.get("/books/formats/", response_model=List[EnumEntry])
def book_formats() -> List[EnumEntry]:
    return [EnumEntry(**e) for e in BookFormat.listing()]


@router.get("/media/genres/", response_model=List[EnumEntry])
def media_genres() -> List[EnumEntry]:
    return [EnumEntry(**e) for e in MediaGenre.listing()]


@router.get("/media/supports/", response_model=List[EnumEntry])
def media_supports() -> List[EnumEntry]:
    return [EnumEntry(**e) for e in MediaSupport.listing()]


@router.get("/video-games/platforms/", response_model=List[EnumEntry])
def video_game_platforms() -> List[EnumEntry]:
    return [EnumEntry(**e) for e in VideoGamePlatform.listing()]


@router.get(f"{cfg.api.prefix}/animes/genres/", response_model=List[EnumEntry])
def anime_genres() -> List[EnumEntry]:
    # film/TV genres only; book, music and game genres do not apply
    return [EnumEntry(value=g.value, label=g.label) for g in VIDEO_GENRES]
