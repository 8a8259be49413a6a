"""Episodes of the series that have playable content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .video import (
    RatingStore,
    Video,
    format_duration,
    format_rating,
    resolve_out,
    resolve_store,
)

_EPISODES: dict[int, tuple[str, tuple[tuple[str, int], ...]]] = {
    21: (
        "Breaking Bad",
        (
            ("Pilot", 58),
            ("Cat's in the Bag...", 48),
            ("...And the Bag's in the River", 48),
        ),
    ),
    22: (
        "Game of Thrones",
        (("Winter Is Coming", 62), ("The Kingsroad", 56), ("Lord Snow", 58)),
    ),
    23: ("Stranger Things", (("The Vanishing of Will Byers", 49),)),
    24: ("The Office", (("Pilot", 22),)),
    26: ("The Crown", (("Wolferton Splash", 56),)),
    # The listing heading for this series reuses the previous title.
    27: ("The Crown", (("Descenso", 57),)),
}


@dataclass(frozen=True)
class Episode(Video):
    """An episode; ``id`` is ``series_id * 100 + number``."""

    season: int = 0
    number: int = 0

    def __str__(self) -> str:
        head = f"T{self.season}E{self.number}: {self.name} | {format_duration(self.duration)} | "
        if self.rating == 0.0:
            return head
        return f"{head}Calificación: {format_rating(self.rating)}"

    def show(self, ratings: RatingStore | None = None, out: TextIO | None = None) -> None:
        """List the episodes of the series whose id this episode carries."""
        show_episodes(self.id, ratings, out)


def episodes_for(series_id: int, ratings: RatingStore | None = None) -> list[Episode]:
    """Episodes of ``series_id`` with their average ratings; empty if it has none."""
    entry = _EPISODES.get(series_id)
    if entry is None:
        return []
    store = resolve_store(ratings)
    episodes = []
    for number, (name, duration) in enumerate(entry[1], start=1):
        episode_id = series_id * 100 + number
        episodes.append(
            Episode(episode_id, name, duration, "", store.average(episode_id), 1, number)
        )
    return episodes


def episode_count(series_id: int) -> int:
    """Number of episodes available for ``series_id``."""
    entry = _EPISODES.get(series_id)
    return len(entry[1]) if entry else 0


def has_episodes(series_id: int) -> bool:
    """Whether ``series_id`` has any episodes to play."""
    return series_id in _EPISODES


def show_episodes(
    series_id: int, ratings: RatingStore | None = None, out: TextIO | None = None
) -> None:
    """Write the episode listing of ``series_id``."""
    stream = resolve_out(out)
    entry = _EPISODES.get(series_id)
    if entry is None:
        print("No hay episodios disponibles para esta serie.", file=stream)
        return
    print(f"\nEpisodios de {entry[0]}:", file=stream)
    for episode in episodes_for(series_id, ratings):
        print(episode, file=stream)