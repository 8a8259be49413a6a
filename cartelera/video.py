"""Base video record, duration formatting and the ratings file."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from statistics import fmean
from typing import TextIO

RATINGS_FILE = "calificaciones.txt"


def format_duration(minutes: int) -> str:
    """Render a length in minutes as ``"<h>h <m>m"``."""
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}m"


def format_rating(rating: float) -> str:
    """Render a rating the way it is shown and stored (shortest general form)."""
    return f"{rating:g}"


@dataclass
class RatingStore:
    """Ratings kept as ``<id> <rating>`` lines in a plain text file."""

    path: str | os.PathLike[str] = RATINGS_FILE

    def _records(self) -> Iterator[tuple[int, float]]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError:
            return
        for id_token, rating_token in zip(tokens[::2], tokens[1::2]):
            try:
                record = int(id_token), float(rating_token)
            except ValueError:
                # Reading stops at the first record that does not parse.
                return
            yield record

    def average(self, video_id: int) -> float:
        """Mean of all ratings saved for ``video_id``, or 0.0 if there are none."""
        ratings = [rating for rid, rating in self._records() if rid == video_id]
        return fmean(ratings) if ratings else 0.0

    def save(self, video_id: int, rating: float) -> None:
        """Append a rating for ``video_id``; raises OSError if the file cannot be opened."""
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(f"{video_id} {format_rating(rating)}\n")


def resolve_store(ratings: RatingStore | None) -> RatingStore:
    return ratings if ratings is not None else RatingStore()


def resolve_out(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


@dataclass(frozen=True)
class Video:
    """A catalogue entry with its average rating (0.0 when unrated)."""

    id: int
    name: str
    duration: int
    genre: str
    rating: float = 0.0

    def __str__(self) -> str:
        parts = [self.name, format_duration(self.duration), self.genre]
        if self.rating != 0.0:
            parts.append(f"Calificación: {format_rating(self.rating)}")
        return " | ".join(parts)

    def show(self, ratings: RatingStore | None = None, out: TextIO | None = None) -> None:
        """Write this entry on its own line."""
        print(self, file=resolve_out(out))