"""tagscrub - strip junk annotations from user-generated music metadata."""

__version__ = "0.1.0"

from tagscrub.cleaning import (
    clean_common,
    clean_album_title,
    clean_track_title,
    clean_artists,
    clean_field,
)
from tagscrub.models import CleanedField
from tagscrub.config import TagscrubConfig

__all__ = [
    "clean_common",
    "clean_album_title",
    "clean_track_title",
    "clean_artists",
    "clean_field",
    "CleanedField",
    "TagscrubConfig",
]
