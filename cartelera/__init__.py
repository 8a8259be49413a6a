"""Terminal catalogue of films and series with playback and ratings."""

__version__ = "0.1.0"