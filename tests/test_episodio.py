import io

import pytest

from cartelera.episodio import (
    Episode,
    episode_count,
    episodes_for,
    has_episodes,
    show_episodes,
)
from cartelera.video import RatingStore, format_duration


@pytest.fixture
def store(tmp_path):
    return RatingStore(tmp_path / "r.txt")


def test_episode_counts_from_source():
    assert episode_count(21) == 3
    assert episode_count(22) == 3
    assert episode_count(23) == 1
    assert episode_count(25) == 0


@pytest.mark.parametrize("series_id", range(15, 45))
def test_has_episodes_matches_count(series_id, store):
    assert has_episodes(series_id) == (episode_count(series_id) > 0)
    assert len(episodes_for(series_id, store)) == episode_count(series_id)


def test_breaking_bad_episodes(store):
    episodes = episodes_for(21, store)
    assert [e.id for e in episodes] == [2101, 2102, 2103]
    assert [e.name for e in episodes] == [
        "Pilot",
        "Cat's in the Bag...",
        "...And the Bag's in the River",
    ]
    assert [e.duration for e in episodes] == [58, 48, 48]
    assert all(e.season == 1 for e in episodes)


def test_unrated_episode_string(store):
    first = episodes_for(21, store)[0]
    assert str(first) == f"T1E1: Pilot | {format_duration(58)} | "


def test_rated_episode_string(store):
    store.save(2101, 5.0)
    first = episodes_for(21, store)[0]
    assert first.rating == 5.0
    assert str(first).endswith("Calificación: 5")


def test_show_episodes_unknown_series(store):
    out = io.StringIO()
    show_episodes(25, store, out)
    assert out.getvalue() == "No hay episodios disponibles para esta serie.\n"


def test_show_episodes_lists_heading_and_episodes(store):
    out = io.StringIO()
    show_episodes(22, store, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == ""
    assert lines[1] == "Episodios de Game of Thrones:"
    assert lines[2:] == [str(e) for e in episodes_for(22, store)]


def test_episode_show_uses_its_series_id(store):
    out_direct = io.StringIO()
    show_episodes(24, store, out_direct)
    out_method = io.StringIO()
    Episode(24, "", 0, "", 0.0, 0, 0).show(store, out_method)
    assert out_method.getvalue() == out_direct.getvalue()
    assert "Episodios de The Office:" in out_method.getvalue()