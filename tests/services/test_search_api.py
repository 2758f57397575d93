# tests/services/test_search_api.py
from __future__ import annotations

import pytest

PREFIX = "/media-library"


@pytest.mark.parametrize(
    "slug, field",
    [("series", "current_season"), ("animes", "current_season"), ("comics", "current_volume")],
)
def test_search_by_title_and_number(api_client, slug, field):
    for n in (1, 2):
        r = api_client.post(f"{PREFIX}/{slug}/", json={"title": "One Piece", field: n})
        assert r.status_code == 201, r.text

    r = api_client.get(f"{PREFIX}/{slug}/search/title/one piece/2")
    assert r.status_code == 200
    assert r.json()[field] == 2
    assert r.json()["title"] == "One Piece"

    assert api_client.get(f"{PREFIX}/{slug}/search/title/One Piece/3").status_code == 404
    # exact title, not a substring
    assert api_client.get(f"{PREFIX}/{slug}/search/title/Piece/1").status_code == 404


def test_movies_have_no_number_search(api_client):
    r = api_client.get(f"{PREFIX}/movies/search/title/Alien/1")
    assert r.status_code == 404
    assert r.json() == {"detail": "Not Found"}


def test_same_series_other_season_is_not_a_conflict(api_client):
    assert api_client.post(f"{PREFIX}/series/", json={"title": "Twin Peaks", "current_season": 1}).status_code == 201
    assert api_client.post(f"{PREFIX}/series/", json={"title": "Twin Peaks", "current_season": 2}).status_code == 201
    assert api_client.post(f"{PREFIX}/series/", json={"title": "twin peaks", "current_season": 2}).status_code == 409
