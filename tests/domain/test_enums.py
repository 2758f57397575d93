import pytest

from medialibrary.domain.enums import (
    VIDEO_GENRES,
    BookFormat,
    MediaGenre,
    MediaSupport,
    VideoGamePlatform,
)


def test_members_are_plain_strings_with_labels():
    assert MediaGenre.HEROIC_FANTASY == "HEROIC_FANTASY"
    assert MediaGenre.HEROIC_FANTASY.label == "Heroic Fantasy"
    assert MediaSupport("BLU_RAY") is MediaSupport.BLU_RAY
    assert VideoGamePlatform.SNES.label == "Super NES"


def test_listing_keeps_declaration_order():
    listing = BookFormat.listing()
    assert listing == [
        {"value": "CLASSICAL", "label": "Classical"},
        {"value": "POCKET", "label": "Pocket"},
        {"value": "UNSPECIFIED", "label": "Unspecified"},
    ]


def test_unknown_value_is_rejected():
    with pytest.raises(ValueError):
        MediaSupport("LASERDISC")


def test_video_genres_stop_at_western():
    assert VIDEO_GENRES[0] is MediaGenre.ACTION
    assert VIDEO_GENRES[-1] is MediaGenre.WESTERN
    assert MediaGenre.HORROR in VIDEO_GENRES
    assert MediaGenre.RPG not in VIDEO_GENRES
