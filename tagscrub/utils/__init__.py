"""Utility functions for tagscrub."""

from tagscrub.utils.parsing import (
    remove_year_annotation,
    remove_mp3_format_label,
    remove_bitrate_annotation,
    remove_redundant_whitespace,
)

__all__ = [
    "remove_year_annotation",
    "remove_mp3_format_label",
    "remove_bitrate_annotation",
    "remove_redundant_whitespace",
]
