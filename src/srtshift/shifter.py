"""
Subtitle shifting session: parse a .srt file, shift cues, render the result.
"""
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .backup import BackupManager
from .errors import NotParsedError, ParseError
from .logging import get_logger
from .serializer import SubtitleSerializer
from .shift import ShiftEngine
from .subtitles import CueCollection, SubtitleParser, DEFAULT_LINE_BREAK


def read_subtitle_file( path: Path ) -> str:
    """
    Read a whole subtitle file as UTF-8 text, line breaks untranslated.

    Raises:
        ParseError: If the file is not valid UTF-8
        OSError: If the file cannot be read
    """
    try:
        with open( path, "r", encoding="utf-8", newline="" ) as f:
            return f.read();
    except UnicodeDecodeError as e:
        raise ParseError( f"{path} is not valid UTF-8: {e.reason} at byte {e.start}" ) from e;


class SessionState( Enum ):
    NEW = "new";        # Nothing parsed yet, render/shift are refused
    PARSED = "parsed";  # Cue collection available


class SubtitleShifter:
    """
    One subtitle file's parse/shift/render session.

    The session owns its cue collection exclusively. Shifting and rendering
    are only allowed once parsing has succeeded.

    Example:
        subs = SubtitleShifter( Path( "mysubs.srt" ) );
        subs.parse();
        subs.shift( 12, 2345 );   # subtitles 12 onward, 2.345 seconds later
        print( subs.render() );
    """

    def __init__( self, source: Union[str, os.PathLike, None] = None, line_break: str = DEFAULT_LINE_BREAK ):
        """
        Args:
            source: Path of the .srt file read by parse() when called without
                arguments
            line_break: Line break convention of the file, CRLF by default
        """
        self.logger = get_logger();
        self.source = Path( source ) if source is not None else None;
        self.line_break = line_break;
        self.state = SessionState.NEW;
        self.subtitles: Optional[CueCollection] = None;

        self.parser = SubtitleParser( line_break );
        self.shift_engine = ShiftEngine();
        self.serializer = SubtitleSerializer( line_break );

    @property
    def parsed( self ) -> bool:
        """Whether subtitles have been parsed and can be shifted or rendered."""
        return self.state is SessionState.PARSED;

    def _require_parsed( self, action: str ):
        if self.state is not SessionState.PARSED:
            raise NotParsedError( f"Cannot {action}: file has not been parsed yet" );

    def read_source( self, path: Path ) -> str:
        self.logger.info( f"Parsing subtitle file: {path}" );
        return read_subtitle_file( path );

    def parse( self, path_or_text: Union[str, os.PathLike, None] = None ) -> CueCollection:
        """
        Parse subtitles into the session's cue collection.

        A plain str is always treated as SubRip text, never as a file name;
        wrap file names in Path( ... ) to read them.

        Args:
            path_or_text: Raw SubRip text (str), a file path (os.PathLike),
                or None to read the source given to the constructor

        Returns:
            The parsed CueCollection

        Raises:
            ValueError: If no text and no source file are available
            ParseError: If the subtitles are malformed or the file is not UTF-8
            FormatError: If a timestamp is malformed
            OSError: If the file cannot be read
        """
        if path_or_text is None:
            if self.source is None:
                raise ValueError( "No subtitle source given" );
            raw_text = self.read_source( self.source );
        elif isinstance( path_or_text, os.PathLike ):
            raw_text = self.read_source( Path( path_or_text ) );
        else:
            raw_text = path_or_text;

        cues = self.parser.parse( raw_text );

        self.subtitles = cues;
        self.state = SessionState.PARSED;
        self.logger.debug( f"Session holds {len( cues )} subtitles" );
        return cues;

    def shift( self, index: int, delta_ms: int ) -> int:
        """
        Shift subtitles from index onward by delta_ms milliseconds.

        Returns:
            Number of subtitles shifted

        Raises:
            NotParsedError: If called before parse()
            OverlapError: If a backward shift is rejected
        """
        self._require_parsed( "shift subtitles" );
        shifted = self.shift_engine.shift( self.subtitles, index, delta_ms );
        self.logger.info( f"Shifted {shifted} subtitle(s) from index {index} by {delta_ms}ms" );
        return shifted;

    def render( self ) -> str:
        """
        Render the parsed subtitles as SubRip text.

        Raises:
            NotParsedError: If called before parse()
        """
        self._require_parsed( "render subtitles" );
        return self.serializer.render( self.subtitles );

    def save( self, destination: Union[str, os.PathLike], backup_manager: Optional[BackupManager] = None ) -> Path:
        """
        Write the rendered subtitles to a file.

        Args:
            destination: Output path
            backup_manager: When given and destination exists, it is backed
                up before being overwritten

        Returns:
            Path written
        """
        output = self.render();
        destination = Path( destination );

        if backup_manager is not None and destination.exists():
            backup_manager.create_backup( destination );

        with open( destination, "w", encoding="utf-8", newline="" ) as f:
            f.write( output );

        self.logger.info( f"Wrote {len( self.subtitles )} subtitles to {destination}" );
        return destination;

    def __str__( self ):
        return self.render();
