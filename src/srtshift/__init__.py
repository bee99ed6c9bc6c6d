"""
srtshift - SubRip subtitle shifting utility.

Parses .srt files into index-keyed cues, shifts a contiguous run of cues
by a number of milliseconds and renders valid SubRip text again.
"""

__version__ = "1.1.0";
__author__ = "srtshift Project";
__license__ = "MIT";

from .errors import SubtitleShifterError, FormatError, ParseError, OverlapError, NotParsedError
from .subtitles import Cue, CueCollection, SubtitleParser
from .shift import ShiftEngine
from .serializer import SubtitleSerializer
from .shifter import SubtitleShifter, SessionState
