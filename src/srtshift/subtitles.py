"""
SubRip data model and parser: raw .srt text into an index-keyed cue collection.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import ParseError
from .logging import get_logger
from . import timecode


DEFAULT_LINE_BREAK = "\r\n";
TIME_SEPARATOR = "-->";
BYTE_ORDER_MARK = "\ufeff";


@dataclass
class Cue:
    """Represents a single subtitle entry with timing in milliseconds."""

    index: int;   # Declared sequence number, an opaque key
    start: int;   # Start time in milliseconds
    end: int;     # End time in milliseconds
    text: str;    # Caption text, lines joined with the file's line break

    def __repr__( self ):
        return f"Cue(index={self.index}, start={self.start}ms, end={self.end}ms, text='{self.text[:30]}')";


class CueCollection:
    """
    Mapping of subtitle index to Cue.

    Indices are not guaranteed to start at 1 or to be contiguous, so cues are
    stored by key rather than by position. Iteration is always in ascending
    numeric index order.
    """

    def __init__( self, cues: Optional[List[Cue]] = None ):
        self._cues: Dict[int, Cue] = {};
        for cue in cues or []:
            self.add( cue );

    def add( self, cue: Cue ) -> Optional[Cue]:
        """
        Insert a cue, replacing any cue with the same index.

        Returns:
            The replaced cue, or None if the index was new
        """
        previous = self._cues.get( cue.index );
        self._cues[cue.index] = cue;
        return previous;

    def get( self, index: int ) -> Optional[Cue]:
        return self._cues.get( index );

    def indices( self ) -> List[int]:
        """Subtitle indices in ascending order."""
        return sorted( self._cues );

    def items( self ) -> List[Tuple[int, Cue]]:
        return [ ( index, self._cues[index] ) for index in self.indices() ];

    def __getitem__( self, index: int ) -> Cue:
        return self._cues[index];

    def __contains__( self, index ) -> bool:
        return index in self._cues;

    def __len__( self ) -> int:
        return len( self._cues );

    def __iter__( self ) -> Iterator[Cue]:
        for index in self.indices():
            yield self._cues[index];

    def __eq__( self, other ) -> bool:
        if not isinstance( other, CueCollection ):
            return NotImplemented;
        return self._cues == other._cues;

    def __repr__( self ):
        return f"CueCollection({len( self._cues )} cues)";


class SubtitleParser:
    """
    SubRip parser splitting raw text into cue blocks.

    A block is an index line, a "start --> end" time line and zero or more
    lines of caption text. Blocks are separated by a blank line, i.e. two
    consecutive line breaks of the configured convention.
    """

    def __init__( self, line_break: str = DEFAULT_LINE_BREAK ):
        if not line_break:
            raise ValueError( "Line break must be a non-empty string" );
        self.logger = get_logger();
        self.line_break = line_break;

    def strip_bom( self, raw_text: str ) -> str:
        """Remove a leading UTF-8 byte order mark, if present."""
        if raw_text.startswith( BYTE_ORDER_MARK ):
            self.logger.debug( "Stripped UTF-8 byte order mark" );
            return raw_text[len( BYTE_ORDER_MARK ):];
        return raw_text;

    def split_blocks( self, raw_text: str ) -> List[str]:
        """Split raw text into non-blank cue blocks."""
        blocks = raw_text.split( self.line_break * 2 );
        return [ block for block in blocks if block.strip() ];

    def parse_block( self, block: str, block_number: int = None ) -> Cue:
        """
        Parse a single cue block.

        Args:
            block: Text of one cue block
            block_number: 1-based position of the block, used in error messages

        Returns:
            Parsed Cue

        Raises:
            ParseError: If the block has fewer than two lines, a non-integer
                index or a malformed time line
            FormatError: If either timestamp is malformed
        """
        lines = block.split( self.line_break );

        # Stray line breaks around a block are not part of it
        while lines and not lines[0].strip():
            lines.pop( 0 );
        while lines and not lines[-1].strip():
            lines.pop();

        if len( lines ) < 2:
            raise ParseError( f"Expected an index and a time line, got {len( lines )} line(s)", block_number );

        index_line = lines[0].strip();
        if not index_line.isdecimal():
            raise ParseError( f"Index is not an integer: {index_line!r}", block_number );
        index = int( index_line );

        times = lines[1].split( f" {TIME_SEPARATOR} " );
        if len( times ) != 2:
            raise ParseError( f"Malformed time line: {lines[1]!r}", block_number );

        return Cue(
            index=index,
            start=timecode.decode( times[0] ),
            end=timecode.decode( times[1] ),
            text=self.line_break.join( lines[2:] )
        );

    def parse( self, raw_text: str ) -> CueCollection:
        """
        Parse SubRip text into a CueCollection.

        A later block with the same index replaces the earlier one.

        Args:
            raw_text: Full contents of a .srt file

        Returns:
            CueCollection keyed by subtitle index
        """
        raw_text = self.strip_bom( raw_text );

        cues = CueCollection();
        for block_number, block in enumerate( self.split_blocks( raw_text ), start=1 ):
            cue = self.parse_block( block, block_number );
            if cues.add( cue ) is not None:
                self.logger.warning( f"Duplicate subtitle index {cue.index}, keeping the later entry" );

        self.logger.debug( f"Parsed {len( cues )} subtitle entries" );
        return cues;


def parse( raw_text: str, line_break: str = DEFAULT_LINE_BREAK ) -> CueCollection:
    """Parse SubRip text using a one-off SubtitleParser."""
    return SubtitleParser( line_break ).parse( raw_text );


def detect_line_break( raw_text: str ) -> str:
    """Guess the line break convention of raw SubRip text (CRLF or LF)."""
    return "\r\n" if "\r\n" in raw_text else "\n";
