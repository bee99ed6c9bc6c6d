"""
Test cases for environment based configuration.
"""
import os
import pytest
from pathlib import Path
from unittest.mock import patch
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from srtshift.config import ShifterConfig


class TestShifterConfig:
    """Test configuration defaults and validation."""

    def test_defaults( self ):
        config = ShifterConfig();

        assert config.linebreak == "crlf";
        assert config.line_break == "\r\n";
        assert config.log_dir is None;
        assert config.backup_dir == Path( "backup" );
        assert config.max_backups == 25;
        assert config.debug is False;

    def test_line_break_values( self ):
        assert ShifterConfig( linebreak="lf" ).line_break == "\n";
        assert ShifterConfig( linebreak="auto" ).line_break is None;

    def test_invalid_line_break( self ):
        with pytest.raises( ValueError ):
            ShifterConfig( linebreak="cr" );

    def test_invalid_max_backups( self ):
        with pytest.raises( ValueError ):
            ShifterConfig( max_backups=0 );


class TestEnvironmentLoading:
    """Test loading SRTSHIFT_* variables."""

    @patch.dict( os.environ, {}, clear=True )
    def test_missing_environment_variables( self, tmp_path ):
        config = ShifterConfig.from_environment( tmp_path / ".env" );

        assert config == ShifterConfig();

    @patch.dict( os.environ, {
        'SRTSHIFT_LINEBREAK': 'LF',
        'SRTSHIFT_LOG_DIR': 'logs',
        'SRTSHIFT_BACKUP_DIR': 'old-subs',
        'SRTSHIFT_MAX_BACKUPS': '3',
        'SRTSHIFT_DEBUG': 'yes'
    }, clear=True )
    def test_environment_variable_loading( self, tmp_path ):
        config = ShifterConfig.from_environment( tmp_path / ".env" );

        assert config.linebreak == "lf";
        assert config.log_dir == Path( "logs" );
        assert config.backup_dir == Path( "old-subs" );
        assert config.max_backups == 3;
        assert config.debug is True;

    @patch.dict( os.environ, {}, clear=True )
    def test_env_file_loading( self, tmp_path ):
        env_file = tmp_path / ".env";
        env_file.write_text( "SRTSHIFT_LINEBREAK=auto\nSRTSHIFT_MAX_BACKUPS=7\n" );

        config = ShifterConfig.from_environment( env_file );

        assert config.linebreak == "auto";
        assert config.max_backups == 7;

    @patch.dict( os.environ, { 'SRTSHIFT_LINEBREAK': 'lf' }, clear=True )
    def test_environment_overrides_env_file( self, tmp_path ):
        env_file = tmp_path / ".env";
        env_file.write_text( "SRTSHIFT_LINEBREAK=crlf\n" );

        assert ShifterConfig.from_environment( env_file ).linebreak == "lf";

    @patch.dict( os.environ, { 'SRTSHIFT_MAX_BACKUPS': 'many' }, clear=True )
    def test_invalid_max_backups_variable( self, tmp_path ):
        with pytest.raises( ValueError ):
            ShifterConfig.from_environment( tmp_path / ".env" );


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
