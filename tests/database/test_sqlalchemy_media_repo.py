from datetime import date

from medialibrary.database.models import Actor, Book, Comic, Movie, Series
from medialibrary.database.repos.media_repo import SqlAlchemyMediaRepo


def _movie(title, runtime=120, release_date=date(1977, 5, 25), **kw):
    return Movie(title=title, runtime=runtime, release_date=release_date, **kw)


def test_add_get_and_list_in_insertion_order(db):
    repo = SqlAlchemyMediaRepo(db, Movie)
    a = repo.add(_movie("Alien"))
    b = repo.add(_movie("Blade Runner"))

    assert a.id is not None and b.id is not None
    assert repo.get(a.id) is a
    assert [m.title for m in repo.list_all()] == ["Alien", "Blade Runner"]
    # lists default to []
    assert a.genres == [] and a.main_actors == []


def test_get_ignores_rows_of_other_types(db):
    movie = SqlAlchemyMediaRepo(db, Movie).add(_movie("Heat"))

    assert SqlAlchemyMediaRepo(db, Series).get(movie.id) is None
    assert SqlAlchemyMediaRepo(db, Movie).get(movie.id + 1000) is None


def test_book_repo_excludes_comics(db):
    books = SqlAlchemyMediaRepo(db, Book)
    comics = SqlAlchemyMediaRepo(db, Comic)
    novel = books.add(Book(title="Dune"))
    comic = comics.add(Comic(title="Akira", current_volume=1))

    assert [b.title for b in books.list_all()] == ["Dune"]
    assert books.get(comic.id) is None
    assert comics.get(comic.id) is comic
    assert books.search_title("u") == [novel]
    assert [c.title for c in comics.search_title("kir")] == ["Akira"]


def test_search_title_is_case_insensitive_substring(db):
    repo = SqlAlchemyMediaRepo(db, Movie)
    repo.add(_movie("Star Wars"))
    repo.add(_movie("The Empire Strikes Back"))
    repo.add(_movie("Jaws"))

    assert [m.title for m in repo.search_title("STAR")] == ["Star Wars"]
    assert [m.title for m in repo.search_title("s")] == ["Star Wars", "The Empire Strikes Back", "Jaws"]
    assert repo.search_title("zardoz") == []


def test_search_title_treats_like_wildcards_literally(db):
    repo = SqlAlchemyMediaRepo(db, Book)
    repo.add(Book(title="100 Bullets"))
    repo.add(Book(title="Dune"))
    pct = repo.add(Book(title="50% Off"))

    assert repo.search_title("100%") == []
    assert repo.search_title("D_ne") == []
    assert repo.search_title("50%") == [pct]


def test_blank_title_search_matches_nothing(db):
    repo = SqlAlchemyMediaRepo(db, Book)
    repo.add(Book(title="Dune"))

    assert repo.search_title("   ") == []
    assert repo.search_title("") == []


def test_find_by_natural_key(db):
    repo = SqlAlchemyMediaRepo(db, Movie)
    m = repo.add(_movie("Star Wars", runtime=121))

    assert repo.find_by_natural_key("star wars", runtime=121, release_date=date(1977, 5, 25)) is m
    assert repo.find_by_natural_key("Star Wars", runtime=125, release_date=date(1977, 5, 25)) is None
    assert repo.find_by_natural_key("Star Wars", exclude_id=m.id, runtime=121, release_date=date(1977, 5, 25)) is None


def test_natural_key_matches_null_fields(db):
    repo = SqlAlchemyMediaRepo(db, Series)
    s = repo.add(Series(title="Twin Peaks"))

    assert repo.find_by_natural_key("Twin Peaks", current_season=None) is s
    assert repo.find_by_natural_key("Twin Peaks", current_season=2) is None


def test_latest_returns_newest_window_oldest_first(db):
    repo = SqlAlchemyMediaRepo(db, Movie)
    for i in range(5):
        repo.add(_movie(f"Movie {i}"))

    assert [m.title for m in repo.latest(3)] == ["Movie 2", "Movie 3", "Movie 4"]


def test_delete_keeps_linked_people(db):
    repo = SqlAlchemyMediaRepo(db, Movie)
    actor = Actor(first_name="Sigourney", last_name="Weaver")
    movie = repo.add(_movie("Aliens", main_actors=[actor]))

    repo.delete(movie)

    assert repo.get(movie.id) is None
    assert repo.list_all() == []
    assert db.get(Actor, actor.id) is actor
