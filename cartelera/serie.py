"""The series catalogue."""

from __future__ import annotations

from typing import TextIO

from .video import RatingStore, Video, resolve_out, resolve_store

FIRST_SERIES_ID = 21

_SERIES: tuple[tuple[str, int, str], ...] = (
    ("Breaking Bad", 47, "Drama"),
    ("Game of Thrones", 57, "Fantasía"),
    ("Stranger Things", 51, "Ciencia ficción"),
    ("The Office", 22, "Comedia"),
    ("Friends", 22, "Comedia"),
    ("The Crown", 58, "Drama histórico"),
    ("Narcos", 49, "Crimen"),
    ("Money Heist", 67, "Thriller"),
    ("The Witcher", 60, "Fantasía"),
    ("Ozark", 60, "Thriller"),
    ("House of Cards", 51, "Drama político"),
    ("Black Mirror", 61, "Ciencia ficción"),
    ("Sherlock", 88, "Misterio"),
    ("The Mandalorian", 40, "Space opera"),
    ("Better Call Saul", 46, "Drama"),
    ("Succession", 60, "Drama"),
    ("The Boys", 60, "Superhéroes"),
    ("Euphoria", 50, "Drama"),
    ("Wednesday", 51, "Comedia"),
    ("The Last of Us", 81, "Post-apocalíptico"),
)


class Series(Video):
    """A series from the catalogue (ids 21 to 40)."""

    def show(self, ratings: RatingStore | None = None, out: TextIO | None = None) -> None:
        """List the whole series catalogue, numbered from 1."""
        stream = resolve_out(out)
        for position, series in enumerate(get_series(ratings), start=1):
            print(f"{position} - {series}", file=stream)


def get_series(ratings: RatingStore | None = None) -> list[Series]:
    """All series, each carrying its average rating from ``ratings``."""
    store = resolve_store(ratings)
    return [
        Series(series_id, name, duration, genre, store.average(series_id))
        for series_id, (name, duration, genre) in enumerate(_SERIES, start=FIRST_SERIES_ID)
    ]