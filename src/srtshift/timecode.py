"""
Conversion between SubRip timestamps and integer milliseconds.
"""
import re

from .errors import FormatError


# Time looks like: hh:mm:ss,mmm (fields are not required to be zero-padded)
TIMESTAMP_PATTERN = re.compile( r'^(\d+):(\d+):(\d+),(\d+)$' );

MS_PER_HOUR = 60 * 60 * 1000;
MS_PER_MINUTE = 60 * 1000;
MS_PER_SECOND = 1000;


def decode( text: str ) -> int:
    """
    Convert a SubRip timestamp into milliseconds.

    Args:
        text: Timestamp string like "00:01:23,456"

    Returns:
        Total milliseconds since 00:00:00,000

    Raises:
        FormatError: If the text is not a hh:mm:ss,mmm timestamp
    """
    match = TIMESTAMP_PATTERN.match( text.strip() ) if isinstance( text, str ) else None;
    if not match:
        raise FormatError( f"Invalid timestamp format: {text!r}" );

    hours, minutes, seconds, milliseconds = ( int( group ) for group in match.groups() );

    return (
        hours * MS_PER_HOUR +
        minutes * MS_PER_MINUTE +
        seconds * MS_PER_SECOND +
        milliseconds
    );


def encode( ms: int ) -> str:
    """
    Convert milliseconds into a zero-padded SubRip timestamp.

    Hours are not wrapped, so decode( encode( x ) ) == x for any x >= 0.

    Args:
        ms: Milliseconds since 00:00:00,000

    Returns:
        Timestamp string like "00:01:23,456"

    Raises:
        FormatError: If ms is negative
    """
    if ms < 0:
        raise FormatError( f"Cannot encode negative time: {ms}ms" );

    hours = ms // MS_PER_HOUR;
    minutes = ( ms // MS_PER_MINUTE ) % 60;
    seconds = ( ms // MS_PER_SECOND ) % 60;
    milliseconds = ms % 1000;

    return "%02d:%02d:%02d,%03d" % ( hours, minutes, seconds, milliseconds );
