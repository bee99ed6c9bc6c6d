"""
Test cases for SubRip parsing and the cue collection.
"""
import pytest
from pathlib import Path
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from srtshift.errors import FormatError, ParseError
from srtshift.subtitles import Cue, CueCollection, SubtitleParser, detect_line_break, parse


CRLF_SUBS = (
    "1\r\n"
    "00:00:01,000 --> 00:00:02,000\r\n"
    "A\r\n"
    "\r\n"
    "2\r\n"
    "00:00:03,000 --> 00:00:04,000\r\n"
    "B\r\n"
    "\r\n"
);


class TestCueCollection:
    """Test the index-keyed cue collection."""

    def test_iterates_in_ascending_index_order( self ):
        cues = CueCollection( [
            Cue( 10, 0, 1, "ten" ),
            Cue( 2, 0, 1, "two" ),
            Cue( 7, 0, 1, "seven" )
        ] );

        assert cues.indices() == [ 2, 7, 10 ];
        assert [ cue.text for cue in cues ] == [ "two", "seven", "ten" ];
        assert [ index for index, _ in cues.items() ] == [ 2, 7, 10 ];

    def test_lookup_by_index_not_position( self ):
        cues = CueCollection( [ Cue( 12, 0, 1, "twelve" ) ] );

        assert 12 in cues;
        assert 0 not in cues;
        assert cues[12].text == "twelve";
        assert cues.get( 1 ) is None;
        with pytest.raises( KeyError ):
            cues[1];

    def test_add_replaces_same_index( self ):
        cues = CueCollection();
        first = Cue( 1, 0, 1, "first" );

        assert cues.add( first ) is None;
        assert cues.add( Cue( 1, 5, 6, "second" ) ) is first;
        assert len( cues ) == 1;
        assert cues[1].text == "second";

    def test_equality( self ):
        assert CueCollection( [ Cue( 1, 0, 1, "a" ) ] ) == CueCollection( [ Cue( 1, 0, 1, "a" ) ] );
        assert CueCollection( [ Cue( 1, 0, 1, "a" ) ] ) != CueCollection( [ Cue( 1, 0, 2, "a" ) ] );


class TestSubtitleParser:
    """Test parsing of raw SubRip text."""

    def test_parse_basic( self ):
        cues = parse( CRLF_SUBS );

        assert len( cues ) == 2;
        assert cues[1] == Cue( 1, 1000, 2000, "A" );
        assert cues[2] == Cue( 2, 3000, 4000, "B" );

    def test_parse_without_trailing_separator( self ):
        cues = parse( CRLF_SUBS.rstrip( "\r\n" ) );

        assert cues[2].text == "B";

    def test_parse_multiline_text( self ):
        raw = "1\r\n00:00:01,000 --> 00:00:02,000\r\nFirst line\r\nSecond line\r\n\r\n";
        cues = parse( raw );

        assert cues[1].text == "First line\r\nSecond line";

    def test_parse_strips_bom( self ):
        cues = parse( "\ufeff" + CRLF_SUBS );

        assert cues.indices() == [ 1, 2 ];

    def test_parse_lf_line_breaks( self ):
        raw = CRLF_SUBS.replace( "\r\n", "\n" );
        cues = parse( raw, "\n" );

        assert cues[1] == Cue( 1, 1000, 2000, "A" );
        assert cues[2] == Cue( 2, 3000, 4000, "B" );

    def test_parse_non_contiguous_indices( self ):
        raw = (
            "5\r\n00:00:01,000 --> 00:00:02,000\r\nfive\r\n\r\n"
            "9\r\n00:00:03,000 --> 00:00:04,000\r\nnine"
        );
        cues = parse( raw );

        assert cues.indices() == [ 5, 9 ];

    def test_parse_duplicate_index_last_wins( self ):
        raw = (
            "1\r\n00:00:01,000 --> 00:00:02,000\r\nold\r\n\r\n"
            "1\r\n00:00:05,000 --> 00:00:06,000\r\nnew"
        );
        cues = parse( raw );

        assert len( cues ) == 1;
        assert cues[1] == Cue( 1, 5000, 6000, "new" );

    def test_parse_block_without_text( self ):
        cues = parse( "3\r\n00:00:01,000 --> 00:00:02,000" );

        assert cues[3].text == "";

    def test_parse_ignores_extra_blank_lines( self ):
        raw = CRLF_SUBS.replace( "B\r\n\r\n", "B\r\n\r\n\r\n\r\n\r\n" ) + "\r\n\r\n";
        cues = parse( raw );

        assert cues.indices() == [ 1, 2 ];

    def test_parse_empty_text( self ):
        assert len( parse( "" ) ) == 0;
        assert len( parse( "\ufeff\r\n\r\n" ) ) == 0;

    def test_parse_single_line_block( self ):
        with pytest.raises( ParseError ) as excinfo:
            parse( CRLF_SUBS + "3\r\n\r\n" );

        assert excinfo.value.block_number == 3;

    def test_parse_non_integer_index( self ):
        with pytest.raises( ParseError ):
            parse( "one\r\n00:00:01,000 --> 00:00:02,000\r\nA" );

    def test_parse_missing_time_separator( self ):
        with pytest.raises( ParseError ):
            parse( "1\r\n00:00:01,000 00:00:02,000\r\nA" );

    def test_parse_malformed_timestamp( self ):
        with pytest.raises( FormatError ):
            parse( "1\r\n00:00:01 --> 00:00:02,000\r\nA" );

    def test_empty_line_break_rejected( self ):
        with pytest.raises( ValueError ):
            SubtitleParser( "" );


class TestDetectLineBreak:

    def test_detect( self ):
        assert detect_line_break( CRLF_SUBS ) == "\r\n";
        assert detect_line_break( CRLF_SUBS.replace( "\r\n", "\n" ) ) == "\n";


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
