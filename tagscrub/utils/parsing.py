"""Annotation stripping stages for user-generated music metadata.

Titles scraped from upload sites and torrent indexes carry noise such as
``(2019)``, ``[Mp3]`` or ``(320 kbps)``. Each stage below removes one kind of
annotation and replaces it with a single space so neighbouring words never
fuse; ``remove_redundant_whitespace`` tidies up afterwards.
"""

import re
import string

# ASCII punctuation, brackets and "_" included; lookarounds only reject
# letters and digits so "_" frames a label on either side.
_PUNCT = re.escape(string.punctuation)

# A year is only noise when set off by punctuation; bare numbers may belong
# to an artist name or album title.
YEAR_REGEX = re.compile(
    rf"(?:[{_PUNCT}]|(?<![^\W_]))(?:19|20)[0-9]{{2}}[{_PUNCT}]"
)
MP3_REGEX = re.compile(
    rf"(?:[\s{_PUNCT}]|(?<![^\W_]))mp3(?:[\s{_PUNCT}]|(?![^\W_]))",
    re.IGNORECASE,
)
BITRATE_REGEX = re.compile(
    rf"(?:[\s{_PUNCT}]|(?<![^\W_]))[0-9]+\s*kbps(?:[\s{_PUNCT}]|(?![^\W_]))",
    re.IGNORECASE,
)
REDUNDANT_WHITESPACE_REGEX = re.compile(r"\s+")
BEGINNING_WHITESPACE_REGEX = re.compile(r"^\s+")
ENDING_WHITESPACE_REGEX = re.compile(r"\s+$")


def remove_year_annotation(dirty: str) -> str:
    """Remove year annotations such as ``[2019]`` or ``(1997)``.

    Args:
        dirty: Raw metadata string

    Returns:
        String with each framed year replaced by a space

    Examples:
        >>> remove_year_annotation("IGOR (2019)")
        'IGOR  '

        >>> remove_year_annotation("Song 2019")
        'Song 2019'
    """
    return YEAR_REGEX.sub(" ", dirty)


def remove_mp3_format_label(dirty: str) -> str:
    """Remove the case-insensitive ``mp3`` label from a string.

    The label may be framed by one bracket, punctuation or whitespace
    character on either side; the frame is removed with it. An unframed
    ``mp3`` that is part of a longer word is left alone.

    Examples:
        >>> remove_mp3_format_label("IGOR [Mp3]")
        'IGOR  '

        >>> remove_mp3_format_label("Mp3Gain")
        'Mp3Gain'
    """
    return MP3_REGEX.sub(" ", dirty)


def remove_bitrate_annotation(dirty: str) -> str:
    """Remove bitrate annotations such as ``(128kbps)`` or ``320 KBPS``.

    Examples:
        >>> remove_bitrate_annotation("IGOR (320 kbps)")
        'IGOR  '

        >>> remove_bitrate_annotation("kbps")
        'kbps'
    """
    return BITRATE_REGEX.sub(" ", dirty)


def remove_redundant_whitespace(dirty: str) -> str:
    """Remove unnecessary whitespace from a string.

    Three kinds of whitespace are removed:
    1. Runs of whitespace in the middle of the string (collapsed to one space)
    2. All whitespace at the beginning of the string
    3. All whitespace at the end of the string

    Examples:
        >>> remove_redundant_whitespace("  Artist   -   Song  ")
        'Artist - Song'

        >>> remove_redundant_whitespace("")
        ''
    """
    text = REDUNDANT_WHITESPACE_REGEX.sub(" ", dirty)
    text = BEGINNING_WHITESPACE_REGEX.sub("", text)
    return ENDING_WHITESPACE_REGEX.sub("", text)
