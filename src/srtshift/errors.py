"""
Exception hierarchy for srtshift.

Every error raised by the parse/shift/render pipeline derives from
SubtitleShifterError, so front ends can catch the whole family at once.
"""


class SubtitleShifterError( Exception ):
    """Base class for all srtshift errors."""


class FormatError( SubtitleShifterError, ValueError ):
    """A timestamp does not match HH:MM:SS,mmm or cannot be encoded."""


class ParseError( SubtitleShifterError, ValueError ):
    """A cue block is malformed (missing lines, bad index, bad time line)."""

    def __init__( self, message: str, block_number: int = None ):
        if block_number is not None:
            message = f"Block {block_number}: {message}";
        super().__init__( message );
        self.block_number = block_number;


class OverlapError( SubtitleShifterError, RuntimeError ):
    """A backward shift would cross the end of the preceding cue."""


class NotParsedError( SubtitleShifterError, RuntimeError ):
    """Render or shift was attempted before the subtitles were parsed."""
