import io

import pytest

from cartelera.video import RatingStore, Video, format_duration


@pytest.mark.parametrize("minutes", range(0, 400, 7))
def test_format_duration_round_trip(minutes):
    text = format_duration(minutes)
    hours_part, minutes_part = text.split(" ")
    assert hours_part.endswith("h") and minutes_part.endswith("m")
    hours, rest = int(hours_part[:-1]), int(minutes_part[:-1])
    assert 0 <= rest < 60
    assert hours * 60 + rest == minutes


def test_format_duration_exact_hour():
    assert format_duration(60) == "1h 0m"


def test_unrated_video_string_has_no_rating():
    video = Video(1, "A", 125, "G", 0.0)
    assert str(video) == f"A | {format_duration(125)} | G"


def test_rated_video_string_shows_rating():
    video = Video(1, "A", 125, "G", 4.5)
    assert str(video) == f"A | {format_duration(125)} | G | Calificación: 4.5"


def test_video_show_writes_line():
    video = Video(3, "Name", 90, "Drama", 0.0)
    out = io.StringIO()
    video.show(None, out)
    assert out.getvalue() == str(video) + "\n"


def test_average_missing_file_is_zero(tmp_path):
    store = RatingStore(tmp_path / "none.txt")
    assert store.average(1) == 0.0


def test_save_then_average_round_trip(tmp_path):
    store = RatingStore(tmp_path / "r.txt")
    store.save(7, 4.5)
    assert store.average(7) == 4.5
    assert store.average(8) == 0.0


def test_save_line_format(tmp_path):
    path = tmp_path / "r.txt"
    store = RatingStore(path)
    store.save(7, 4.5)
    store.save(2101, 5.0)
    assert path.read_text(encoding="utf-8") == "7 4.5\n2101 5\n"


def test_average_is_mean_of_ratings(tmp_path):
    store = RatingStore(tmp_path / "r.txt")
    for rating in (2.0, 4.0, 3.0):
        store.save(5, rating)
    store.save(6, 1.0)
    assert store.average(5) == 3.0
    assert store.average(6) == 1.0


def test_average_stops_at_malformed_record(tmp_path):
    path = tmp_path / "r.txt"
    path.write_text("1 2.0\nabc 5\n1 4.0\n", encoding="utf-8")
    assert RatingStore(path).average(1) == 2.0