"""
Backups of subtitle files before they are overwritten.
"""
import shutil
from datetime import datetime
from pathlib import Path
from typing import List, Tuple

from .logging import get_logger


DEFAULT_BACKUP_DIR = Path( "backup" );
DEFAULT_MAX_BACKUPS = 25;


class BackupManager:
    """
    Keeps ISO-8601 timestamped copies of files about to be overwritten.

    Backups are named <stem>.<YYYY-MM-DDTHH-MM-SS><suffix> inside the backup
    directory. Only the newest max_backups copies per file are kept.
    """

    def __init__( self, backup_dir: Path = None, max_backups: int = DEFAULT_MAX_BACKUPS ):
        if max_backups < 1:
            raise ValueError( "max_backups must be at least 1" );
        self.logger = get_logger();
        self.backup_dir = Path( backup_dir ) if backup_dir else DEFAULT_BACKUP_DIR;
        self.max_backups = max_backups;

    def get_backup_filename( self, original_file: Path ) -> str:
        timestamp = datetime.now().isoformat( timespec="seconds" ).replace( ":", "-" );
        return f"{original_file.stem}.{timestamp}{original_file.suffix}";

    def get_existing_backups( self, original_file: Path ) -> List[Tuple[Path, datetime]]:
        """
        List existing backups of a file.

        Args:
            original_file: Path to original file

        Returns:
            List of (backup_path, timestamp) tuples, oldest first
        """
        if not self.backup_dir.exists():
            return [];

        backup_pattern = f"{original_file.stem}.????-??-??T??-??-??{original_file.suffix}";

        backups = [];
        for backup_path in self.backup_dir.glob( backup_pattern ):
            timestamp_str = backup_path.name[len( original_file.stem ) + 1:][:19];
            date_part, time_part = timestamp_str.split( "T" );
            try:
                timestamp = datetime.fromisoformat( f"{date_part}T{time_part.replace( '-', ':' )}" );
            except ValueError as e:
                self.logger.debug( f"Skipping malformed backup file {backup_path}: {e}" );
                continue;
            backups.append( ( backup_path, timestamp ) );

        backups.sort( key=lambda item: item[1] );
        return backups;

    def apply_retention_policy( self, original_file: Path ) -> int:
        """
        Remove the oldest backups beyond max_backups.

        Returns:
            Number of backups removed
        """
        backups = self.get_existing_backups( original_file );
        if len( backups ) <= self.max_backups:
            return 0;

        removed = 0;
        for backup_path, _ in backups[:-self.max_backups]:
            try:
                backup_path.unlink();
                removed += 1;
                self.logger.debug( f"Removed old backup: {backup_path.name}" );
            except OSError as e:
                self.logger.warning( f"Could not remove backup {backup_path}: {e}" );

        if removed:
            self.logger.info( f"Removed {removed} old backup(s) of {original_file.name}" );
        return removed;

    def create_backup( self, file_path: Path ) -> Path:
        """
        Copy a file into the backup directory and apply the retention policy.

        Args:
            file_path: File about to be overwritten

        Returns:
            Path to the created backup

        Raises:
            FileNotFoundError: If file_path does not exist
        """
        file_path = Path( file_path );
        if not file_path.exists():
            raise FileNotFoundError( f"File to backup not found: {file_path}" );

        self.backup_dir.mkdir( parents=True, exist_ok=True );
        backup_path = self.backup_dir / self.get_backup_filename( file_path );

        shutil.copy2( file_path, backup_path );
        self.logger.info( f"Created backup: {backup_path}" );

        self.apply_retention_policy( file_path );
        return backup_path;
