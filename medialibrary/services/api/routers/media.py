# medialibrary/services/api/routers/media.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter

from medialibrary.services.api.resources import MEDIA_RESOURCES
from medialibrary.services.api.routers._media_crud import build_media_router

routers: List[APIRouter] = [build_media_router(r) for r in MEDIA_RESOURCES]
