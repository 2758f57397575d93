# tests/services/test_movies_api.py
from __future__ import annotations

PREFIX = "/media-library"


def _star_wars(**overrides):
    body = {
        "title": "Star Wars",
        "original_title": "Star Wars: Episode IV - A New Hope",
        "release_date": "1977-05-25",
        "runtime": 121,
        "genres": ["SCIENCE_FICTION", "ADVENTURE"],
        "supports": ["DVD", "BLU_RAY"],
        "languages_spoken": ["EN"],
        "subtitles": ["fr", "de"],
        "directors": [{"first_name": "George", "last_name": "Lucas"}],
        "producers": [{"first_name": "Gary", "last_name": "Kurtz"}],
        "main_actors": [
            {"first_name": "Mark", "last_name": "Hamill"},
            {"first_name": "Harrison", "last_name": "Ford"},
        ],
    }
    body.update(overrides)
    return body


def test_create_movie_with_people(api_client):
    r = api_client.post(f"{PREFIX}/movies/", json=_star_wars())
    assert r.status_code == 201, r.text
    movie = r.json()

    assert movie["genres"] == ["SCIENCE_FICTION", "ADVENTURE"]
    assert movie["languages_spoken"] == ["en"]
    assert [d["last_name"] for d in movie["directors"]] == ["Lucas"]
    assert [a["last_name"] for a in movie["main_actors"]] == ["Hamill", "Ford"]
    assert all(isinstance(a["id"], int) for a in movie["main_actors"])


def test_people_are_reused_across_submissions(api_client):
    first = api_client.post(f"{PREFIX}/movies/", json=_star_wars()).json()
    second = api_client.post(
        f"{PREFIX}/movies/",
        json=_star_wars(
            title="The Empire Strikes Back",
            release_date="1980-05-21",
            runtime=124,
            directors=[{"first_name": "Irvin", "last_name": "Kershner"}],
            main_actors=[{"first_name": "Harrison", "last_name": "Ford"}],
        ),
    ).json()

    ford_first = next(a for a in first["main_actors"] if a["last_name"] == "Ford")
    assert second["main_actors"] == [ford_first]
    assert second["producers"] == first["producers"]

    actors = api_client.get(f"{PREFIX}/actors/").json()
    assert sorted(a["last_name"] for a in actors) == ["Ford", "Hamill"]
    directors = api_client.get(f"{PREFIX}/directors/").json()
    assert [d["last_name"] for d in directors] == ["Lucas", "Kershner"]


def test_same_title_with_other_runtime_is_a_different_movie(api_client):
    assert api_client.post(f"{PREFIX}/movies/", json=_star_wars()).status_code == 201
    assert api_client.post(f"{PREFIX}/movies/", json=_star_wars(runtime=125)).status_code == 201
    assert api_client.post(f"{PREFIX}/movies/", json=_star_wars(runtime=125)).status_code == 409


def test_update_replaces_people(api_client):
    movie = api_client.post(f"{PREFIX}/movies/", json=_star_wars()).json()

    r = api_client.put(
        f"{PREFIX}/movies/{movie['id']}",
        json=_star_wars(main_actors=[{"first_name": "Carrie", "last_name": "Fisher"}]),
    )
    assert r.status_code == 200, r.text
    assert [a["last_name"] for a in r.json()["main_actors"]] == ["Fisher"]

    # the replaced actors still exist, only the links changed
    actors = api_client.get(f"{PREFIX}/actors/").json()
    assert sorted(a["last_name"] for a in actors) == ["Fisher", "Ford", "Hamill"]


def test_delete_movie_keeps_people(api_client):
    movie = api_client.post(f"{PREFIX}/movies/", json=_star_wars()).json()

    r = api_client.delete(f"{PREFIX}/movies/{movie['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == movie["id"]

    assert api_client.get(f"{PREFIX}/movies/").status_code == 204
    assert api_client.get(f"{PREFIX}/search/director", params={"fname": "George", "lname": "Lucas"}).status_code == 200
