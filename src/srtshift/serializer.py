"""
Serializer rendering a cue collection back into SubRip text.
"""
from .subtitles import Cue, CueCollection, DEFAULT_LINE_BREAK, TIME_SEPARATOR
from . import timecode


class SubtitleSerializer:
    """Render cues in ascending index order, separated by blank lines."""

    def __init__( self, line_break: str = DEFAULT_LINE_BREAK ):
        if not line_break:
            raise ValueError( "Line break must be a non-empty string" );
        self.line_break = line_break;

    def render_cue( self, cue: Cue ) -> str:
        """Render one cue: index line, time line, caption text."""
        time_line = f"{timecode.encode( cue.start )} {TIME_SEPARATOR} {timecode.encode( cue.end )}";
        return self.line_break.join( [ str( cue.index ), time_line, cue.text ] );

    def render( self, cues: CueCollection ) -> str:
        """
        Render the whole collection.

        There is no blank line or line break after the last cue.

        Args:
            cues: Cue collection to render

        Returns:
            SubRip text ("" for an empty collection)
        """
        separator = self.line_break * 2;
        return separator.join( self.render_cue( cue ) for cue in cues );


def render( cues: CueCollection, line_break: str = DEFAULT_LINE_BREAK ) -> str:
    """Render cues using a one-off SubtitleSerializer."""
    return SubtitleSerializer( line_break ).render( cues );
