"""Terminal key reader for typetrainer."""

import codecs
import logging
import os
import select
import threading
from queue import Full, Queue
from typing import Optional

from core.key_events import Quit
from utils.keymap import get_key_name, split_pending_escape, translate

log = logging.getLogger("typetrainer.key_reader")

READ_SIZE = 64
POLL_INTERVAL_SEC = 0.1


class KeyReader:
    """Reads raw terminal input in a background thread and queues key events.

    The terminal must already be in raw mode (curses does this). The reader
    only produces immutable key events; it never touches engine state.
    """

    def __init__(self, event_queue: Queue, fd: Optional[int] = None):
        """Initialize key reader.

        Args:
            event_queue: Queue to send key events to
            fd: File descriptor to read from (default: stdin)
        """
        self.event_queue = event_queue
        self.fd = fd if fd is not None else 0
        self.running = False
        self.thread: Optional[threading.Thread] = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._event_count = 0
        self._drop_count = 0
        self._pending = ""
        self.input_closed = False

    def start(self) -> None:
        """Start reading key events in background thread."""
        if self.running:
            return

        self.running = True
        self.thread = threading.Thread(target=self._run_listener, daemon=True)
        self.thread.start()

    def stop(self) -> None:
        """Stop reading key events."""
        self.running = False
        if self.thread and self.thread is not threading.current_thread():
            self.thread.join(timeout=2 * POLL_INTERVAL_SEC)

    def _run_listener(self) -> None:
        """Main loop that waits for terminal input."""
        log.info(f"Listening for keys on fd {self.fd}")

        while self.running:
            try:
                ready, _, _ = select.select([self.fd], [], [], POLL_INTERVAL_SEC)
                if not ready:
                    self._flush_pending()
                    continue
                data = os.read(self.fd, READ_SIZE)
            except OSError as e:
                log.error(f"Error reading terminal input: {e}")
                self.input_closed = True
                break

            if not data:
                log.warning("Terminal input closed")
                self.input_closed = True
                break

            self._process_bytes(data)

        if self.input_closed:
            self._flush_pending()
            # Must not be dropped like ordinary keys
            self.event_queue.put(Quit())
        self.running = False
        log.info("Key reader stopped")

    def _process_bytes(self, data: bytes) -> None:
        """Decode a chunk of input and queue the resulting key events."""
        decoded = self._decoder.decode(data)
        if not decoded:
            return

        if self._event_count < 5:
            self._event_count += 1
            log.debug(f"Received input: {[get_key_name(c) for c in decoded]}")

        text, self._pending = split_pending_escape(self._pending + decoded)
        for event in translate(text):
            self._queue_key_event(event)

    def _flush_pending(self) -> None:
        """Translate a held-back escape once no more input follows it."""
        if not self._pending:
            return
        text, self._pending = self._pending, ""
        for event in translate(text):
            self._queue_key_event(event)

    def _queue_key_event(self, event) -> None:
        try:
            self.event_queue.put(event, block=False)
        except Full:
            self._drop_count += 1
            # Log every 100th dropped event to avoid spam
            if self._drop_count % 100 == 1:
                log.warning(f"Queue full! Dropped {self._drop_count} events. "
                            f"Queue size: {self.event_queue.qsize()}")
