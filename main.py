#!/usr/bin/env python3
"""typetrainer - terminal typing speed trainer."""

import argparse
import curses
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Callable, List, Optional

from core.key_events import Quit, Restart
from core.key_reader import KeyReader
from core.models import EngineSettings
from core.results import ResultLog
from core.stats import compute_stats
from core.typing_engine import TypingEngine
from ui.terminal import TerminalRenderer
from utils.config import DEFAULT_CONFIG_PATH, Config
from utils.text_source import make_content_source
from utils.themes import THEMES

log = logging.getLogger("typetrainer")

USAGE_EPILOG = """\
By default a test consists of 50 random words. Arbitrary text can also be
piped into the program to create a custom test; each paragraph of the input
is a segment of the test, e.g.

  shuf -n 40 /usr/share/dict/words | typetrainer

Keybindings:
  <esc>          Restarts the test
  <C-c>          Quits
  <C-backspace>  Deletes the previous word (also <C-w>)
"""


def setup_logging(verbose: bool = False) -> Path:
    """Configure logging to a rotating file in the XDG state directory.

    Stderr shares the terminal with curses, so a stream handler is only
    added on request.

    Returns:
        Path to the log file
    """
    xdg_state_home = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state_home) / "typetrainer"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "typetrainer.log"

    # 5MB max, keep 5 backups
    handlers: List[logging.Handler] = [
        RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    ]
    if verbose:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
    return log_file


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typetrainer",
        description="Terminal typing speed trainer.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-n", type=int, default=50,
                        help="The number of random words which constitute the test.")
    parser.add_argument("-w", type=int, default=config.get_int("wrap", 80),
                        help="Wraps the text at the given number of columns.")
    parser.add_argument("-t", type=int, default=config.get_int("timeout", -1),
                        help="Terminate the test after the given number of seconds (-1 = never).")
    parser.add_argument("--noskip", action="store_true", default=config.get_bool("noskip"),
                        help="Disable word skipping when space is pressed.")
    parser.add_argument("--csv", action="store_true",
                        help="Print the test results to stdout as <wpm>,<cpm>,<accuracy>.")
    parser.add_argument("--raw", action="store_true",
                        help="Use piped text verbatim as a single segment.")
    parser.add_argument("-o", dest="one_shot", action="store_true",
                        help="Automatically exit after a single run.")
    parser.add_argument("--theme", default="",
                        help=f"The theme to use (overrides {DEFAULT_CONFIG_PATH}).")
    parser.add_argument("--list", choices=["themes"],
                        help="'--list themes' prints the available themes.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging, also to stderr.")
    return parser


def parse_args(argv: Optional[List[str]], config: Config) -> argparse.Namespace:
    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.n < 1:
        parser.error("-n must be at least 1")
    if args.w < 1:
        parser.error("-w must be at least 1")
    if args.t == 0 or args.t < -1:
        parser.error("-t must be a positive number of seconds or -1")
    return args


def read_piped_input() -> Optional[str]:
    """Read stdin if it is not a terminal and reattach stdin to the terminal.

    Returns:
        The piped text, or None if stdin is a terminal

    Undecodable bytes are replaced rather than rejected.

    Raises:
        OSError: If stdin cannot be read or /dev/tty cannot be opened
    """
    if sys.stdin.isatty():
        return None

    text = sys.stdin.buffer.read().decode("utf-8", errors="replace")
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(tty_fd, 0)
    os.close(tty_fd)
    return text


class Application:
    """Drives runs of the typing engine until the user quits."""

    def __init__(self, screen,
                 content_source: Callable[[], List[str]],
                 settings: EngineSettings,
                 colors: dict,
                 results: ResultLog,
                 wrap: int = 80,
                 one_shot: bool = False):
        self.content_source = content_source
        self.results = results
        self.one_shot = one_shot
        self.event_queue: Queue = Queue(maxsize=1000)

        self.renderer = TerminalRenderer(screen, colors, wrap)
        self.reader = KeyReader(self.event_queue)
        self.engine = TypingEngine(
            self.event_queue, settings, on_update=self.renderer.draw,
            content_source=content_source,
        )

    def run(self) -> None:
        self.reader.start()
        try:
            while True:
                result = self.engine.start(self.content_source())
                if not result.reports_stats:
                    return

                stats = compute_stats(result)
                self.results.append(stats)
                log.info(f"WPM {stats.wpm}, CPM {stats.cpm}, accuracy {stats.accuracy:.2f}%")
                if self.one_shot:
                    return

                self.renderer.show_report(stats)
                if not self.wait_for_continue():
                    return
        finally:
            self.reader.stop()

    def wait_for_continue(self) -> bool:
        """Block on the report screen until Esc (True) or Ctrl-C (False)."""
        while True:
            event = self.event_queue.get()
            if isinstance(event, Restart):
                return True
            if isinstance(event, Quit):
                return False


def main(argv: Optional[List[str]] = None) -> int:
    config = Config()
    args = parse_args(argv, config)

    if args.list == "themes":
        for name in THEMES:
            print(name)
        return 0

    log_file = setup_logging(args.verbose)
    log.info(f"Log file: {log_file}")
    log.debug(f"Settings: {config.get_all()}")

    try:
        colors = config.resolve_theme(args.theme)
    except KeyError:
        print(f"ERROR: {args.theme} is not a valid theme "
              f"(see --list themes for a list of valid options).", file=sys.stderr)
        return 1

    try:
        piped = read_piped_input()
    except OSError as e:
        log.error(f"Cannot read input: {e}")
        print(f"ERROR: cannot read input: {e}", file=sys.stderr)
        return 1

    content_source = make_content_source(piped, raw=args.raw, n=args.n)
    if not any(segment.strip() for segment in content_source()):
        log.info("Input contains no text, nothing to practise")
        return 0

    settings = EngineSettings(
        skip_word=not args.noskip,
        timeout_sec=None if args.t == -1 else args.t,
    )
    results = ResultLog()

    def run_curses(screen) -> bool:
        curses.raw()
        curses.noecho()
        app = Application(screen, content_source, settings, colors, results,
                          wrap=args.w, one_shot=args.one_shot)
        app.run()
        return app.reader.input_closed

    try:
        input_closed = curses.wrapper(run_curses)
    except curses.error as e:
        log.error(f"Terminal initialization failed: {e}")
        print(f"ERROR: terminal initialization failed: {e}", file=sys.stderr)
        return 1

    if args.csv:
        results.write_csv(sys.stdout)
    if input_closed:
        log.error("Terminal input was lost")
        print("ERROR: terminal input was lost", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
