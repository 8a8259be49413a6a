import io

from cartelera.serie import Series, get_series
from cartelera.video import RatingStore


def test_catalogue_ids(tmp_path):
    series = get_series(RatingStore(tmp_path / "r.txt"))
    assert [s.id for s in series] == list(range(21, 41))


def test_first_series_fields(tmp_path):
    first = get_series(RatingStore(tmp_path / "r.txt"))[0]
    assert (first.name, first.duration, first.genre) == ("Breaking Bad", 47, "Drama")


def test_last_series_fields(tmp_path):
    last = get_series(RatingStore(tmp_path / "r.txt"))[-1]
    assert (last.name, last.duration, last.genre) == (
        "The Last of Us",
        81,
        "Post-apocalíptico",
    )


def test_ratings_are_taken_from_store(tmp_path):
    store = RatingStore(tmp_path / "r.txt")
    store.save(22, 2.5)
    store.save(22, 4.5)
    series = get_series(store)
    assert series[1].rating == store.average(22)
    assert series[0].rating == 0.0


def test_entries_are_series_and_format_unrated(tmp_path):
    series = get_series(RatingStore(tmp_path / "r.txt"))
    assert {type(s) for s in series} == {Series}
    assert str(series[0]) == "Breaking Bad | 0h 47m | Drama"
    assert str(series[12]) == "Sherlock | 1h 28m | Misterio"


def test_show_lists_whole_catalogue(tmp_path):
    store = RatingStore(tmp_path / "r.txt")
    series = get_series(store)
    out = io.StringIO()
    series[5].show(store, out)
    lines = out.getvalue().splitlines()
    assert len(lines) == len(series)
    assert lines[0] == f"1 - {series[0]}"
    assert lines[-1] == f"{len(series)} - {series[-1]}"