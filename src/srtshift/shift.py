"""
Shift engine: moves a contiguous run of cues by a signed number of milliseconds.
"""
from typing import List

from .errors import OverlapError
from .logging import get_logger
from .subtitles import Cue, CueCollection


class ShiftEngine:
    """
    Apply a uniform time offset to cues from a starting index onward.

    The run starts at the given index and follows consecutive integer keys
    (index, index + 1, ...) until the first missing key. Backward shifts are
    validated before anything is modified, so a rejected shift leaves the
    collection untouched.
    """

    def __init__( self ):
        self.logger = get_logger();

    def collect_run( self, cues: CueCollection, start_index: int ) -> List[Cue]:
        """
        Collect the cues that a shift from start_index would move.

        Args:
            cues: Parsed cue collection
            start_index: Subtitle index where the run begins

        Returns:
            Cues with keys start_index, start_index + 1, ... up to the first gap
        """
        run = [];
        index = start_index;
        while index in cues:
            run.append( cues[index] );
            index += 1;
        return run;

    def check_backward_shift( self, cues: CueCollection, run: List[Cue], delta_ms: int ):
        """
        Validate a backward shift against the preceding cue and time zero.

        Raises:
            OverlapError: If the first shifted cue would start before the
                preceding cue ends, or any cue would start or end before 00:00:00,000
        """
        if not run:
            return;

        first = run[0];
        previous = cues.get( first.index - 1 );
        new_start = first.start + delta_ms;

        if previous is not None and previous.end > new_start:
            raise OverlapError(
                f"Cannot overlap backward shift: subtitle {first.index} would start at "
                f"{new_start}ms, before subtitle {previous.index} ends at {previous.end}ms"
            );

        for cue in run:
            # end < start is not rejected by the parser, so check both
            if min( cue.start, cue.end ) + delta_ms < 0:
                raise OverlapError(
                    f"Cannot shift subtitle {cue.index} by {delta_ms}ms: it would cross 00:00:00,000"
                );

    def shift( self, cues: CueCollection, start_index: int, delta_ms: int ) -> int:
        """
        Shift cues in place from start_index onward by delta_ms.

        Args:
            cues: Parsed cue collection, modified in place
            start_index: Subtitle index where the shift begins
            delta_ms: Milliseconds to add; negative values shift backward

        Returns:
            Number of cues shifted (0 when start_index does not exist)

        Raises:
            OverlapError: If a backward shift is rejected
        """
        run = self.collect_run( cues, start_index );

        if not run:
            self.logger.debug( f"No subtitle with index {start_index}, nothing to shift" );
            return 0;

        if delta_ms < 0:
            self.check_backward_shift( cues, run, delta_ms );

        for cue in run:
            cue.start += delta_ms;
            cue.end += delta_ms;

        self.logger.debug( f"Shifted subtitles {run[0].index}-{run[-1].index} by {delta_ms}ms" );
        return len( run );


def shift( cues: CueCollection, start_index: int, delta_ms: int ) -> int:
    """Shift cues in place using a one-off ShiftEngine."""
    return ShiftEngine().shift( cues, start_index, delta_ms );
