"""
Configuration loaded from the environment and an optional .env file.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .backup import DEFAULT_BACKUP_DIR, DEFAULT_MAX_BACKUPS


LINE_BREAKS = {
    "crlf": "\r\n",
    "lf": "\n",
    "auto": None,  # detected from the source text
};

TRUTHY = ( "1", "true", "yes", "on" );


@dataclass
class ShifterConfig:
    """Settings shared by the CLI and library front ends."""

    linebreak: str = "crlf";                    # Key of LINE_BREAKS
    log_dir: Optional[Path] = None;             # No file logging when unset
    backup_dir: Path = DEFAULT_BACKUP_DIR;      # Where overwritten files are copied
    max_backups: int = DEFAULT_MAX_BACKUPS;     # Copies kept per file
    debug: bool = False;

    def __post_init__( self ):
        if self.linebreak not in LINE_BREAKS:
            raise ValueError( f"Unknown line break '{self.linebreak}', expected one of: {', '.join( LINE_BREAKS )}" );
        if self.max_backups < 1:
            raise ValueError( "Maximum number of backups must be at least 1" );

    @property
    def line_break( self ) -> Optional[str]:
        """Line break sequence, or None when it should be detected."""
        return LINE_BREAKS[self.linebreak];

    @classmethod
    def from_environment( cls, env_file: Path = Path( ".env" ) ) -> "ShifterConfig":
        """
        Build a config from SRTSHIFT_* environment variables.

        Values in env_file are loaded first without overriding variables that
        are already set in the process environment.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        if env_file and Path( env_file ).exists():
            load_dotenv( env_file );

        linebreak = os.getenv( "SRTSHIFT_LINEBREAK", "crlf" ).strip().lower();
        log_dir = os.getenv( "SRTSHIFT_LOG_DIR" );
        backup_dir = os.getenv( "SRTSHIFT_BACKUP_DIR" );
        max_backups = os.getenv( "SRTSHIFT_MAX_BACKUPS" );
        debug = os.getenv( "SRTSHIFT_DEBUG", "" );

        try:
            max_backups = int( max_backups ) if max_backups else DEFAULT_MAX_BACKUPS;
        except ValueError:
            raise ValueError( f"SRTSHIFT_MAX_BACKUPS must be an integer, got: {max_backups}" ) from None;

        return cls(
            linebreak=linebreak,
            log_dir=Path( log_dir ) if log_dir else None,
            backup_dir=Path( backup_dir ) if backup_dir else DEFAULT_BACKUP_DIR,
            max_backups=max_backups,
            debug=debug.strip().lower() in TRUTHY
        );
