"""Interactive console menu for browsing, playing and rating the catalogue."""

from __future__ import annotations

import argparse
import math
import os
import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .episodio import episode_count, has_episodes, show_episodes
from .pelicula import get_movies
from .serie import FIRST_SERIES_ID, get_series
from .video import RatingStore, Video

Opener = Callable[[str], None]

CATALOGUE_SIZE = 20
MOVIES, SERIES, EXIT = 1, 2, 3
YES = 1
POSTER_FOLDER = "Posters"

# Media file stems by movie id - 1; an empty stem means no file is available.
_MOVIE_FILES = (
    "Avatar",
    "AvengersEndgame",
    "AvatarTheWayOfWater",
    "Titanic",
    "NeZha2",
    "",
    "AvengersInfinityWar",
    "SpiderManNoWayHome",
    "InsideOut2",
    "JurassicWorld",
    "ElReyLeon",
)

# Media file stems by (series_id - 21) * 3 + episode - 1.
_EPISODE_FILES = (
    "BreakingBad_Ep1", "BreakingBad_Ep2", "BreakingBad_Ep3",
    "GameOfThrones_Ep1", "GameOfThrones_Ep2", "GameOfThrones_Ep3",
    "StrangerThings_Ep1", "", "",
    "TheOffice_Ep1", "", "",
    "", "", "",
    "TheCrown_Ep1", "", "",
    "Narcos_Ep1", "", "",
)


def _system_open(path: str) -> None:
    """Hand ``path`` to the desktop's default application, ignoring failures."""
    startfile = getattr(os, "startfile", None)
    try:
        if startfile is not None:
            startfile(path)
        else:
            command = "open" if sys.platform == "darwin" else "xdg-open"
            subprocess.Popen(
                [command, path], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
    except OSError:
        pass


def open_media(folder: str, stem: str, opener: Opener | None = None) -> tuple[str, str]:
    """Open the poster and then the video for ``stem``; return both paths."""
    open_path = opener if opener is not None else _system_open
    video_path = os.path.join(folder, f"{stem}.mp4")
    poster_path = os.path.join(POSTER_FOLDER, f"{stem}.jpg")
    open_path(poster_path)
    open_path(video_path)
    return poster_path, video_path


class _Input:
    """Reads whitespace-separated tokens and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None

    def _next_line(self) -> str:
        line = self._stream.readline()
        if line == "":
            raise EOFError
        return line

    def token(self) -> str:
        while True:
            if self._pending is None:
                self._pending = self._next_line()
            stripped = self._pending.lstrip()
            if stripped:
                word = stripped.split(maxsplit=1)[0]
                self._pending = stripped[len(word):]
                return word
            self._pending = None

    def line(self) -> str:
        if self._pending is None:
            text = self._next_line()
        else:
            text = self._pending
        self._pending = None
        return text.rstrip("\r\n")

    def integer(self) -> int | None:
        try:
            return int(self.token())
        except ValueError:
            return None

    def number(self) -> float | None:
        try:
            value = float(self.token())
        except ValueError:
            return None
        return value if math.isfinite(value) else None


class MenuApp:
    """The catalogue's interactive menus, reading from ``stdin`` and writing to ``out``."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        ratings: RatingStore | None = None,
        opener: Opener | None = None,
    ) -> None:
        self._input = _Input(stdin if stdin is not None else sys.stdin)
        self.out = out if out is not None else sys.stdout
        self.ratings = ratings if ratings is not None else RatingStore()
        self.opener = opener

    def _say(self, *parts: object) -> None:
        print(*parts, sep="", file=self.out)

    def _ask(self, prompt: str) -> None:
        print(prompt, end="", file=self.out)
        self.out.flush()

    def _catalogue(self, option: int) -> list[Video] | None:
        if option == MOVIES:
            return list(get_movies(self.ratings))
        if option == SERIES:
            return list(get_series(self.ratings))
        return None

    def run(self) -> None:
        """Show the main menu until the user exits or input runs out."""
        try:
            option = None
            while option != EXIT:
                self._ask(
                    "¿Qué quieres ver hoy?\n"
                    "1. Películas\n"
                    "2. Series\n"
                    "3. Salir\n"
                    "Elige una opción: "
                )
                option = self._input.integer()
                if option in (MOVIES, SERIES):
                    self.show_selection(option)
                elif option == EXIT:
                    self._say("Saliendo...")
                else:
                    self._say("Opción no válida")
        except EOFError:
            pass

    def show_selection(self, option: int) -> None:
        """List movies or series and let the user pick one."""
        videos = self._catalogue(option)
        if videos is None:
            self._say("Opción no válida")
            return
        self._say("\nPelículas disponibles:" if option == MOVIES else "\nSeries disponibles:")
        for position, video in enumerate(videos, start=1):
            self._say(position, " - ", video)
        self._choose(option, videos)

    def _choose(self, option: int, videos: Sequence[Video]) -> None:
        kind = "Películas" if option == MOVIES else "Series"
        item = "película" if option == MOVIES else "serie"
        self._ask(f"¿Quieres filtrar {kind} por género? (1. Sí / 2. No): ")
        choice = self._input.integer()

        if choice == 1:
            self.show_genres(option)
            self._ask("Escribe el género a filtrar: ")
            genre = self._input.line()
            if not genre:
                genre = self._input.line()
            matches = [
                video_id
                for video_id, video in enumerate(videos, start=1)
                if video.genre == genre
            ]
            if not matches:
                self._say(f"No se encontraron {kind} del género: {genre}")
                return
            self._say(f"\n{kind} del género {genre}:")
            for position, video_id in enumerate(matches, start=1):
                self._say(position, " - ", videos[video_id - 1])
            self._ask(f"\nSelecciona una {item} (introduce el número): ")
            selection = self._input.integer()
            if selection is not None and 1 <= selection <= len(matches):
                self.show_actions(option, matches[selection - 1])
            else:
                self._say("Número no válido")
        elif choice == 2:
            self._ask(f"\nSelecciona una {item} (introduce el número): ")
            selection = self._input.integer()
            if selection is not None and 1 <= selection <= CATALOGUE_SIZE:
                self.show_actions(option, selection)
            else:
                self._say("Número no válido")
        else:
            self._say("Opción no válida")

    def show_genres(self, option: int) -> list[str]:
        """Print the distinct genres of the chosen catalogue in order; return them."""
        videos = self._catalogue(option)
        if videos is None:
            return []
        self._say("\nGéneros disponibles:")
        genres = list(dict.fromkeys(video.genre for video in videos))
        for position, genre in enumerate(genres, start=1):
            self._say(position, " - ", genre)
        return genres

    def show_actions(self, option: int, video_id: int) -> None:
        """Offer to watch or review the entry at position ``video_id`` (1-based)."""
        if option == MOVIES:
            self._movie_actions(video_id)
        elif option == SERIES:
            self._series_actions(video_id)
        else:
            self._say("Opción no válida")

    def _movie_actions(self, video_id: int) -> None:
        self._ask(
            "\n¿Qué quieres hacer con la película?\n"
            "1. Ver\n"
            "2. Reseñar\n"
            "Elige una opción: "
        )
        action = self._input.integer()
        if action == 1:
            index = video_id - 1
            if 0 <= index < len(_MOVIE_FILES) and _MOVIE_FILES[index]:
                open_media("Peliculas", _MOVIE_FILES[index], self.opener)
                self._say("Reproduciendo película...")
            else:
                self._say("Película no disponible.")
        elif action == 2:
            self.review(video_id)
        else:
            self._say("Opción no válida")

    def _series_actions(self, position: int) -> None:
        self._ask(
            "\n¿Qué quieres hacer con la serie?\n"
            "1. Ver episodios\n"
            "2. Reseñar serie\n"
            "Elige una opción: "
        )
        action = self._input.integer()
        series_id = position + FIRST_SERIES_ID - 1
        if action == 1:
            show_episodes(series_id, self.ratings, self.out)
            if not has_episodes(series_id):
                return
            self._ask("\nSelecciona un episodio: ")
            number = self._input.integer()
            if number is None or not 1 <= number <= episode_count(series_id):
                self._say("Número de episodio no válido")
                return
            self._say("Reproduciendo episodio...")
            index = (series_id - FIRST_SERIES_ID) * 3 + (number - 1)
            if 0 <= index < len(_EPISODE_FILES) and _EPISODE_FILES[index]:
                open_media("Series", _EPISODE_FILES[index], self.opener)
                self._ask("¿Quieres reseñar este episodio? (1. Sí / 2. No): ")
                if self._input.integer() == YES:
                    self.review(series_id * 100 + number)
            else:
                self._say("Episodio no disponible.")
        elif action == 2:
            self.review(series_id)
        else:
            self._say("Opción no válida")

    def review(self, video_id: int) -> None:
        """Ask for a rating in [0, 5] and store it; an episode's also counts for its series."""
        self._ask("Introduce tu calificación (0.0 - 5.0): ")
        rating = self._input.number()
        while rating is None or not 0.0 <= rating <= 5.0:
            self._ask("Calificación inválida. Introduce un valor entre 0.0 y 5.0: ")
            rating = self._input.number()
        targets = [video_id, video_id // 100] if video_id > 2100 else [video_id]
        for target in targets:
            try:
                self.ratings.save(target, rating)
            except OSError:
                self._say("Error al abrir el archivo para guardar tu calificación")
            else:
                self._say("Calificación guardada exitosamente")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive catalogue menu."""
    parser = argparse.ArgumentParser(description="Browse, play and rate movies and series.")
    parser.parse_args(argv)
    MenuApp().run()
    return 0