"""Typing engine: drives text sessions from a queue of key events."""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from queue import Empty, Queue
from typing import Callable, List, Optional, Sequence, Tuple

from core.countdown import Countdown
from core.key_events import Backspace, Char, DeleteWord, Quit, Restart, TimerExpired
from core.models import EngineSettings, ExitReason, RunResult
from core.text_session import Cell, TextSession, Verdict

log = logging.getLogger("typetrainer.engine")

# Redraw interval while a countdown is running
TICK_INTERVAL_SEC = 0.5


class EngineState(str, Enum):
    """Engine lifecycle states."""

    RUNNING = "running"
    SEGMENT_COMPLETE = "segment_complete"
    FINISHED = "finished"


@dataclass(frozen=True)
class EngineView:
    """Snapshot of everything a renderer needs to draw the current run."""
    segment_index: int
    segment_count: int
    cells: Tuple[Cell, ...]
    cursor: int
    nerrs: int
    ncorrect: int
    finished: bool
    remaining_ns: Optional[int] = None


class TypingEngine:
    """Runs typing attempts over one or more text segments.

    The engine is the only mutator of its state. Key events and timer
    expiries arrive on a single queue and are handled one at a time.
    """

    def __init__(self, event_queue: Queue,
                 settings: Optional[EngineSettings] = None,
                 on_update: Optional[Callable[[EngineView], None]] = None,
                 content_source: Optional[Callable[[], Sequence[str]]] = None,
                 clock: Callable[[], int] = time.monotonic_ns):
        """Initialize typing engine.

        Args:
            event_queue: Queue delivering key events (and timer expiries)
            settings: Skip-word and time limit settings
            on_update: Called with a fresh EngineView after every handled event
                and periodically while a countdown is running
            content_source: Supplies fresh segments when an attempt is restarted;
                without it a restart rewinds the current segments
            clock: Monotonic nanosecond clock
        """
        self.event_queue = event_queue
        self.settings = settings or EngineSettings()
        self.on_update = on_update
        self.content_source = content_source
        self.clock = clock
        self.countdown = Countdown(event_queue, self.settings.timeout_ns, clock)

        self.sessions: List[TextSession] = []
        self.segment_index = 0
        self.nerrs = 0
        self.ncorrect = 0
        self.start_ns: Optional[int] = None
        self.state = EngineState.FINISHED

    @property
    def session(self) -> TextSession:
        return self.sessions[self.segment_index]

    def start(self, segments: Sequence[str]) -> RunResult:
        """Run one attempt over the given segments until it finishes.

        Restarts are handled internally; the call only returns on natural
        completion, timeout or quit.

        Args:
            segments: Target text, one string per segment, in order

        Returns:
            RunResult with the totals of the finished attempt
        """
        self.load(segments)
        log.info(f"Run started: {len(self.sessions)} segment(s), "
                 f"skip_word={self.settings.skip_word}, timeout={self.settings.timeout_sec}")

        reason = self._settle()
        while reason is None:
            self._notify()
            try:
                event = self.event_queue.get(timeout=self._tick_interval())
            except Empty:
                continue
            reason = self.handle(event)

        return self._finish(reason)

    def load(self, segments: Sequence[str]) -> None:
        """Load segments and reset the attempt."""
        self.sessions = [TextSession(text) for text in segments]
        self._reset_attempt()

    def handle(self, event) -> Optional[ExitReason]:
        """Apply a single event from the queue.

        Returns:
            ExitReason if the event finished the run, None otherwise
        """
        if isinstance(event, TimerExpired):
            if self.countdown.is_current(event):
                return ExitReason.TIMEOUT
            log.debug(f"Ignoring stale timer expiry (generation {event.generation})")
            return None

        if self.countdown.expired():
            return ExitReason.TIMEOUT

        if isinstance(event, Char):
            self._type(event.char)
        elif isinstance(event, Backspace):
            self.session.backspace()
        elif isinstance(event, DeleteWord):
            self.session.delete_previous_word()
        elif isinstance(event, Restart):
            self._restart()
        elif isinstance(event, Quit):
            return ExitReason.QUIT
        else:
            raise TypeError(f"Unknown key event: {event!r}")

        return self._settle()

    def view(self) -> EngineView:
        if self.sessions:
            cells, cursor = self.session.cells(), self.session.cursor
        else:
            cells, cursor = (), 0
        return EngineView(
            segment_index=self.segment_index,
            segment_count=len(self.sessions),
            cells=cells,
            cursor=cursor,
            nerrs=self.nerrs,
            ncorrect=self.ncorrect,
            finished=self.state is EngineState.FINISHED,
            remaining_ns=self.countdown.remaining_ns(),
        )

    def _type(self, char: str) -> None:
        if self.start_ns is None:
            self.start_ns = self.clock()
            self.countdown.arm()

        session = self.session
        if char == " " and self.settings.skip_word and session.is_mid_word():
            skipped = session.skip_to_next_word()
            self.nerrs += 1
            log.debug(f"Skipped {skipped} character(s) to next word")
            return

        if session.type_char(char) is Verdict.CORRECT:
            self.ncorrect += 1
        else:
            self.nerrs += 1

    def _restart(self) -> None:
        if self.start_ns is None:
            return

        log.info(f"Attempt restarted (discarding {self.ncorrect} correct, {self.nerrs} errors)")
        if self.content_source is not None:
            self.sessions = [TextSession(text) for text in self.content_source()]
        else:
            for session in self.sessions:
                session.reset()
        self._reset_attempt()

    def _tick_interval(self) -> Optional[float]:
        return TICK_INTERVAL_SEC if self.countdown.armed else None

    def _reset_attempt(self) -> None:
        self.countdown.cancel()
        self.segment_index = 0
        self.nerrs = 0
        self.ncorrect = 0
        self.start_ns = None
        self.state = EngineState.RUNNING

    def _settle(self) -> Optional[ExitReason]:
        """Move past completed segments.

        Returns:
            ExitReason.NATURAL once the last segment is complete
        """
        while not self.sessions or self.session.is_complete():
            self.state = EngineState.SEGMENT_COMPLETE
            if self.segment_index + 1 >= len(self.sessions):
                return ExitReason.NATURAL
            self.segment_index += 1
            self.state = EngineState.RUNNING
            log.debug(f"Advanced to segment {self.segment_index + 1}/{len(self.sessions)}")
        return None

    def _finish(self, reason: ExitReason) -> RunResult:
        self.countdown.cancel()
        self.state = EngineState.FINISHED

        elapsed_ns = 0
        if self.start_ns is not None:
            elapsed_ns = self.clock() - self.start_ns
        result = RunResult(
            nerrs=self.nerrs,
            ncorrect=self.ncorrect,
            elapsed_ns=max(1, elapsed_ns),
            exit_reason=reason,
        )

        self._notify()
        log.info(f"Run finished ({reason.value}): {self.ncorrect} correct, "
                 f"{self.nerrs} errors in {result.elapsed_ns / 1e9:.2f}s")
        return result

    def _notify(self) -> None:
        if self.on_update:
            self.on_update(self.view())
