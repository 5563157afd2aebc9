"""Public cleaning entry points, one per metadata field."""

import logging
from typing import Any, Callable, Dict, List

from tagscrub.models import CleanedField
from tagscrub.utils.parsing import (
    remove_year_annotation,
    remove_mp3_format_label,
    remove_bitrate_annotation,
    remove_redundant_whitespace,
)

logger = logging.getLogger(__name__)


def _run_stages(text: str) -> str:
    text = remove_year_annotation(text)
    text = remove_mp3_format_label(text)
    text = remove_bitrate_annotation(text)
    return remove_redundant_whitespace(text)


def clean_common(dirty: str) -> str:
    """Apply the common set of transformations to a metadata string.

    Stages run in a fixed order: year annotations, the ``mp3`` label,
    bitrate annotations, then whitespace normalization. The spaces left by
    a removal can line up into a new annotation (``9 (320kbps) kbps``), so
    the stages are repeated until the string stops changing. After the
    first pass only a removal can change the string, and every removal
    shortens it.

    Args:
        dirty: Raw metadata string (may be empty)

    Returns:
        Cleaned string, possibly empty

    Examples:
        >>> clean_common("Tyler, The Creator - IGOR (2019) [Mp3] (320 kbps)")
        'Tyler, The Creator - IGOR'

        >>> clean_common("Song 2019")
        'Song 2019'
    """
    cleaned = _run_stages(dirty)
    previous = dirty
    while cleaned != previous:
        previous, cleaned = cleaned, _run_stages(cleaned)
    if cleaned != dirty:
        logger.debug(f'Cleaned "{dirty}" -> "{cleaned}"')
    return cleaned


def clean_album_title(dirty: str) -> str:
    """Clean a raw string that represents an album title."""
    return clean_common(dirty)


def clean_track_title(dirty: str) -> str:
    """Clean a raw string that represents the title of a single track."""
    return clean_common(dirty)


def clean_artists(dirty: str) -> List[str]:
    """Clean a raw string that represents one or more artists.

    The artist string is not split; the result always holds exactly one
    name so callers can rely on a list of artists.
    """
    return [clean_common(dirty)]


FIELD_CLEANERS: Dict[str, Callable[[str], Any]] = {
    "album": clean_album_title,
    "track": clean_track_title,
    "artists": clean_artists,
    "common": clean_common,
}


def clean_field(field: str, dirty: str) -> CleanedField:
    """Clean a value using the cleaner registered for ``field``.

    Raises:
        ValueError: If ``field`` is not one of ``FIELD_CLEANERS``
    """
    try:
        cleaner = FIELD_CLEANERS[field]
    except KeyError:
        raise ValueError(
            f"Unknown field '{field}', expected one of: {', '.join(FIELD_CLEANERS)}"
        ) from None

    result = cleaner(dirty)
    cleaned = result if isinstance(result, list) else [result]
    return CleanedField(field=field, original=dirty, cleaned=cleaned)
