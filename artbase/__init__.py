"""artbase: a feed, upload and booking service for sculptors and photographers."""

__version__ = "0.1.0"
