"""
CLI entry point for srtshift with argument parsing and environment configuration.
"""
import argparse
import re
import sys
from pathlib import Path

from . import __version__
from .backup import BackupManager
from .config import ShifterConfig, LINE_BREAKS
from .errors import SubtitleShifterError
from .logging import setup_logging
from .shifter import SubtitleShifter, read_subtitle_file
from .subtitles import detect_line_break


TIME_PATTERN = re.compile( r'^(\d+)(?:[.,](\d{1,3}))?$' );


def parse_time( value: str ) -> int:
    """
    Convert a seconds value such as "2,345" or "2.345" into milliseconds.

    Raises:
        argparse.ArgumentTypeError: If value is not a non-negative number of
            seconds with at most millisecond precision
    """
    match = TIME_PATTERN.match( value.strip() );
    if not match:
        raise argparse.ArgumentTypeError( f"invalid time '{value}', expected seconds like 2,345 or 2.345" );

    seconds, fraction = match.groups();
    return int( seconds ) * 1000 + int( ( fraction or "0" ).ljust( 3, "0" ) );


class ShifterCLI:
    """
    Command line interface for shifting SubRip subtitles.

    Supports command line arguments with SRTSHIFT_* environment variables
    (or a .env file) supplying the defaults.
    """

    def __init__( self ):
        self.parser = self._create_parser();
        self.args = None;
        self.config = None;
        self.logger = None;

    def _create_parser( self ):
        parser = argparse.ArgumentParser(
            prog="srtshift",
            description="Shift SubRip (.srt) subtitles forward or backward from a given index",
            epilog="Environment variables: SRTSHIFT_LINEBREAK, SRTSHIFT_LOG_DIR, SRTSHIFT_BACKUP_DIR, "
                   "SRTSHIFT_MAX_BACKUPS, SRTSHIFT_DEBUG"
        );

        parser.add_argument(
            "source",
            type=Path,
            help="Subtitle file to read (.srt)"
        );

        parser.add_argument(
            "destination",
            type=Path,
            help="Subtitle file to write; may be the same as source"
        );

        parser.add_argument(
            "--operation", "-o",
            choices=[ "add", "sub" ],
            required=True,
            help="Shift subtitles forward (add) or backward (sub)"
        );

        parser.add_argument(
            "--index", "-i",
            type=int,
            required=True,
            help="Index of the first subtitle to shift"
        );

        parser.add_argument(
            "--time", "-t",
            type=parse_time,
            required=True,
            help="Time to shift by in seconds, e.g. 2,345 or 2.345"
        );

        parser.add_argument(
            "--linebreak",
            choices=list( LINE_BREAKS ),
            default=None,
            help="Line break convention of the source file (default: crlf, or SRTSHIFT_LINEBREAK)"
        );

        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Print the shifted subtitles instead of writing the destination"
        );

        parser.add_argument(
            "--no-backup",
            action="store_true",
            help="Do not back up an existing destination file before overwriting it"
        );

        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug mode with verbose output"
        );

        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        );

        return parser;

    def _load_config( self ):
        """Load configuration from .env and the environment."""
        try:
            return ShifterConfig.from_environment(), [];
        except ValueError as e:
            return None, [ str( e ) ];

    def _validate_arguments( self ):
        errors = [];

        if not self.args.source.exists():
            errors.append( f"Subtitle file not found: {self.args.source}" );
        elif self.args.source.suffix.lower() != ".srt":
            errors.append( f"Only .srt subtitle files are supported, got: {self.args.source.suffix}" );

        if self.args.index < 0:
            errors.append( "Index must not be negative" );

        return errors;

    def parse_args( self, argv=None ):
        """Parse command line arguments and validate configuration."""
        self.args = self.parser.parse_args( argv );

        self.config, errors = self._load_config();
        debug = self.args.debug or ( self.config is not None and self.config.debug );
        log_dir = self.config.log_dir if self.config is not None else None;

        self.logger = setup_logging( debug=debug, log_dir=log_dir );

        errors.extend( self._validate_arguments() );
        if errors:
            self.logger.error( "Configuration errors:" );
            for error in errors:
                self.logger.error( f"  - {error}" );
            sys.exit( 1 );

        if self.args.linebreak is not None:
            self.config.linebreak = self.args.linebreak;

        self.logger.debug( f"srtshift v{__version__} starting..." );
        self.logger.debug( f"Source: {self.args.source}" );
        self.logger.debug( f"Destination: {self.args.destination}" );
        self.logger.debug( f"Line break: {self.config.linebreak}" );

        return self.args;

    @property
    def delta_ms( self ) -> int:
        """Signed shift in milliseconds for the parsed arguments."""
        return -self.args.time if self.args.operation == "sub" else self.args.time;

    def run( self ) -> str:
        """
        Parse, shift and write (or print) the subtitles.

        Returns:
            The rendered subtitles
        """
        raw_text = read_subtitle_file( self.args.source );

        line_break = self.config.line_break or detect_line_break( raw_text );

        subs = SubtitleShifter( self.args.source, line_break );
        subs.parse( raw_text );
        subs.shift( self.args.index, self.delta_ms );

        if self.args.dry_run:
            output = subs.render();
            sys.stdout.write( output + line_break );
            return output;

        backup_manager = None;
        if not self.args.no_backup:
            backup_manager = BackupManager( self.config.backup_dir, self.config.max_backups );

        subs.save( self.args.destination, backup_manager );
        return subs.render();


def main( argv=None ):
    """Main entry point for the srtshift CLI."""
    cli = ShifterCLI();
    cli.parse_args( argv );

    try:
        cli.run();
    except KeyboardInterrupt:
        cli.logger.warning( "Interrupted by user" );
        sys.exit( 130 );
    except ( SubtitleShifterError, OSError ) as e:
        cli.logger.error( f"{type( e ).__name__}: {e}" );
        if cli.args.debug:
            raise;
        sys.exit( 1 );


if __name__ == "__main__":
    main();
