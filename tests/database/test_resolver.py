from medialibrary.database.models import Actor, Album, Director, LabelRecords, Movie, Singer
from medialibrary.database.repos.people_repo import SqlAlchemyPeopleRepo
from medialibrary.services.linking.resolver import RelatedField, resolve_related
from medialibrary.services.schemas.media import AlbumCreate, MovieCreate


def test_resolves_people_onto_the_aggregate(db):
    payload = MovieCreate(
        title="Indiana Jones",
        directors=[{"first_name": "Steven", "last_name": "Spielberg"}],
        main_actors=[
            {"first_name": "Harrison", "last_name": "Ford"},
            {"first_name": " Harrison ", "last_name": "Ford"},
        ],
    )
    movie = Movie(title=payload.title)

    resolve_related(
        db,
        movie,
        payload,
        (RelatedField("directors", Director), RelatedField("main_actors", Actor)),
    )

    assert [d.full_name for d in movie.directors] == ["Steven Spielberg"]
    # whitespace is stripped by the schema, so both entries are the same actor
    assert len(movie.main_actors) == 1
    assert movie.main_actors[0].id is not None


def test_existing_people_are_reused(db):
    ford = SqlAlchemyPeopleRepo(db).find_or_create(Actor, "Harrison", "Ford")
    payload = MovieCreate(title="Witness", main_actors=[{"first_name": "Harrison", "last_name": "Ford"}])
    movie = Movie(title=payload.title)

    resolve_related(db, movie, payload, (RelatedField("main_actors", Actor),))

    assert movie.main_actors == [ford]


def test_resolves_companies(db):
    payload = AlbumCreate(
        title="Thriller",
        singers=[{"first_name": "Michael", "last_name": "Jackson"}],
        label_records=[{"name": "Epic"}],
    )
    album = Album(title=payload.title)

    resolve_related(
        db,
        album,
        payload,
        (RelatedField("label_records", LabelRecords), RelatedField("singers", Singer)),
    )

    assert [lr.name for lr in album.label_records] == ["Epic"]
    assert isinstance(album.label_records[0], LabelRecords)
    assert [s.last_name for s in album.singers] == ["Jackson"]
