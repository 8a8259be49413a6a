"""The movie catalogue."""

from __future__ import annotations

from typing import TextIO

from .video import RatingStore, Video, resolve_out, resolve_store

_MOVIES: tuple[tuple[str, int, str], ...] = (
    ("Avatar", 183, "Ciencia ficción"),
    ("Avengers: Endgame", 181, "Superhéroes"),
    ("Avatar: The Way of Water", 192, "Ciencia ficción"),
    ("Titanic", 195, "Romance"),
    ("Ne Zha 2", 144, "Animación"),
    ("Star Wars: Episodio VII - El despertar de la Fuerza", 136, "Space opera"),
    ("Avengers: Infinity War", 149, "Superhéroes"),
    ("Spider-Man: No Way Home", 148, "Superhéroes"),
    ("Inside Out 2", 96, "Animación"),
    ("Jurassic World", 124, "Ciencia ficción"),
    ("El rey león", 118, "Animación"),
    ("The Avengers", 143, "Superhéroes"),
    ("Furious 7", 140, "Acción"),
    ("Top Gun: Maverick", 131, "Acción"),
    ("Frozen II", 103, "Animación"),
    ("Barbie", 114, "Comedia"),
    ("Avengers: Age of Ultron", 141, "Superhéroes"),
    ("Super Mario Bros.: la película", 92, "Animación"),
    ("Black Panther", 134, "Superhéroes"),
    ("Harry Potter y las reliquias de la Muerte: parte 2", 130, "Fantasía"),
)


class Movie(Video):
    """A movie from the catalogue (ids 1 to 20)."""

    def show(self, ratings: RatingStore | None = None, out: TextIO | None = None) -> None:
        """Announce playback of this movie, if it is one of the playable ones."""
        stream = resolve_out(out)
        if 1 <= self.id <= 10:
            print("\nReproduciendo película:", file=stream)
            # The entry shown is looked up by id used as a zero-based position.
            print(get_movies(ratings)[self.id], file=stream)
        else:
            print("La película no está disponible por el momento.", file=stream)


def get_movies(ratings: RatingStore | None = None) -> list[Movie]:
    """All movies, each carrying its average rating from ``ratings``."""
    store = resolve_store(ratings)
    return [
        Movie(movie_id, name, duration, genre, store.average(movie_id))
        for movie_id, (name, duration, genre) in enumerate(_MOVIES, start=1)
    ]