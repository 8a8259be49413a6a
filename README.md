# cartelera

An interactive terminal menu, in Spanish, for a fixed catalogue of twenty
films and twenty series. From it you can:

- list the films or the series with their duration, genre and, once the title
  has been rated, its average rating;
- filter a list by genre, typing the genre exactly as it is listed;
- list the episodes of the series that have them;
- open a film, or an episode, together with its poster;
- rate a film, a series or a single episode from 0.0 to 5.0.

## Installation

```
pip install .
```

## Usage

Start the menu from the directory that holds your media:

```
cartelera
```

The command takes no options besides `--help`. The menu runs until you choose
"3. Salir" or the input ends.

Films are opened as `Peliculas/<name>.mp4`, episodes as `Series/<name>.mp4`,
and the matching poster as `Posters/<name>.jpg`; the poster is opened first.
Each file is handed to the system's default application (`os.startfile` on
Windows, `open` on macOS, `xdg-open` elsewhere); if that fails, nothing is
reported.

Ratings are appended to `calificaciones.txt` in the current directory, one
`<id> <rating>` pair per line. Films have ids 1 to 20, series 21 to 40, and
an episode has the id `<series id> * 100 + <episode number>`. The averages
shown next to each title are worked out from that file. A rating given to an
episode is also saved for its series.

## Using it as a library

```python
from cartelera.video import RatingStore, format_duration
from cartelera.pelicula import get_movies
from cartelera.serie import get_series
from cartelera.episodio import episodes_for, has_episodes

ratings = RatingStore("calificaciones.txt")
for movie in get_movies(ratings):
    print(movie)          # e.g. "Avatar | 3h 3m | Ciencia ficción"

print(format_duration(125))   # "2h 5m"
print(has_episodes(21))       # True
for episode in episodes_for(21, ratings):
    print(episode)        # e.g. "T1E1: Pilot | 0h 58m | "

ratings.save(1, 4.5)
print(ratings.average(1))
```

- `cartelera.video`: `Video`, `RatingStore` (`average`, `save`) and
  `format_duration`.
- `cartelera.pelicula`: `Movie` and `get_movies`.
- `cartelera.serie`: `Series` and `get_series`.
- `cartelera.episodio`: `Episode`, `episodes_for`, `episode_count`,
  `has_episodes` and `show_episodes`.
- `cartelera.ui`: `MenuApp`, which runs the same menu as the command and can
  be given its own input and output streams, rating store and file opener;
  `open_media`; and `main`, the entry point behind the command.

## Limits

The catalogue is built in and cannot be edited. Media files exist for only
some titles; choosing another one prints that it is not available. Episodes
are listed only for six series. Ratings can be added but not changed or
removed, except by editing `calificaciones.txt` by hand.

## Tests

```
pip install .[test]
pytest
```