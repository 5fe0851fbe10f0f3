"""Terminal display and UI components for File Scraper."""

import os
import sys
from datetime import datetime
from threading import Event, Lock, Thread
from typing import TYPE_CHECKING

import colorama

from .utils import (
    get_terminal_width,
    human_duration,
    human_size,
    human_speed,
    is_tty,
)

if TYPE_CHECKING:
    from .config import Config
    from .models import CopyStats, ScanStats


class Colors:
    """ANSI color codes for terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"
    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"
    CLEAR_LINE = "\033[2K"

    _disabled = False

    @classmethod
    def disable(cls) -> None:
        """Disable all color codes (for non-TTY output)."""
        if cls._disabled:
            return
        cls._disabled = True
        for attr in dir(cls):
            if not attr.startswith("_") and attr.isupper():
                setattr(cls, attr, "")

    @classmethod
    def init(cls) -> None:
        """Initialize colors based on terminal capability."""
        if not is_colorful_supported():
            cls.disable()
            return
        # Windows consoles need ANSI translation switched on
        colorama.just_fix_windows_console()


def is_colorful_supported() -> bool:
    """Check whether colored output should be used."""
    if os.environ.get("NO_COLOR"):
        return False
    return is_tty()


# Initialize colors on module load
Colors.init()


def make_bar(percent: float, width: int = 40) -> str:
    """Create a simple progress bar string."""
    percent = max(0, min(100, percent))
    filled = int((percent / 100) * width)
    return "#" * filled + "-" * (width - filled)


def print_banner() -> None:
    """Print the application banner."""
    C = Colors.CYAN
    W = Colors.WHITE
    B = Colors.BOLD
    D = Colors.DIM
    R = Colors.RESET

    print()
    print(f"{C}╔══════════════════════════════════════════════════════════════════════╗{R}")
    print(f"{C}║{R}{B}{W}                            FILE SCRAPER                              {R}{C}║{R}")
    print(f"{C}╠══════════════════════════════════════════════════════════════════════╣{R}")
    print(f"{C}║{R} {D}  Recursive Scraping   •   Extension & Folder Filters   •   Parallel  {R} {C}║{R}")
    print(f"{C}╚══════════════════════════════════════════════════════════════════════╝{R}")
    print()


def print_header(text: str) -> None:
    """Print a section header."""
    width = min(get_terminal_width() - 4, 76)
    line_len = max(0, width - len(text) - 5)
    print(f"\n{Colors.MAGENTA}{Colors.BOLD}{'─' * 3} {text} {'─' * line_len}{Colors.RESET}")


def print_success(text: str) -> None:
    """Print a success message."""
    print(f"  {Colors.GREEN}✓{Colors.RESET} {text}")


def print_error(text: str) -> None:
    """Print an error message."""
    print(f"  {Colors.RED}✗{Colors.RESET} {text}", file=sys.stderr)


def print_warning(text: str) -> None:
    """Print a warning message."""
    print(f"  {Colors.YELLOW}⚠{Colors.RESET} {text}")


def print_info(text: str) -> None:
    """Print an info message."""
    print(f"  {Colors.CYAN}ℹ{Colors.RESET} {text}")


def print_plan(config: "Config") -> None:
    """Print what is about to be scraped."""
    print_header("Ready to Copy")
    print()
    print(f"    {Colors.BOLD}Source:{Colors.RESET}      {config.source_root}")
    print(f"    {Colors.BOLD}Target:{Colors.RESET}      {config.target_root}")
    print(f"    {Colors.BOLD}Extensions:{Colors.RESET}  {config.extensions.describe()}")
    print(f"    {Colors.BOLD}Folders:{Colors.RESET}     {config.folders.describe()}")
    print(f"    {Colors.BOLD}Links:{Colors.RESET}       {'followed' if config.follow_links else 'not followed'}")
    print(f"    {Colors.BOLD}Workers:{Colors.RESET}     {config.max_workers}")
    if config.dry_run:
        print()
        print_warning("DRY RUN MODE - No files will be copied")
    print()


def print_scan_result(count: int, stats: "ScanStats") -> None:
    """Print the outcome of the scan phase."""
    print_success("Scan complete!")
    print()
    print(f"    Total scanned:      {stats.entries_seen:,}")
    print(f"    {Colors.GREEN}To copy:{Colors.RESET}            {count:,}")
    print(f"    {Colors.YELLOW}Filtered:{Colors.RESET}           {stats.skipped_filter:,}")
    if stats.skipped_error:
        print(f"    {Colors.RED}Unreadable:{Colors.RESET}         {stats.skipped_error:,}")
    print()


def print_summary(stats: "CopyStats", elapsed: float) -> None:
    """Print the copy summary."""
    print_header(f"{Colors.GREEN}COPY COMPLETE{Colors.RESET}")

    print()
    avg_speed = human_speed(stats.bytes_copied / elapsed) if elapsed > 0 and stats.bytes_copied else "N/A"

    print(f"  {Colors.BOLD}Performance{Colors.RESET}")
    print(f"    Completed:    {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"    Duration:     {human_duration(elapsed)}")
    print(f"    Avg Speed:    {avg_speed}")
    print()

    print(f"  {Colors.BOLD}Entries{Colors.RESET}")
    print(f"    {Colors.GREEN}Copied:{Colors.RESET}       {stats.files_copied:,} ({human_size(stats.bytes_copied)})")
    print(f"    {Colors.BLUE}Directories:{Colors.RESET}  {stats.dirs_created:,}")

    if stats.files_failed > 0:
        print(f"    {Colors.RED}Failed:{Colors.RESET}       {stats.files_failed:,}")
    print()

    print(f"  {'─' * 60}")

    if stats.files_failed == 0:
        print(f"  {Colors.GREEN}✓{Colors.RESET} {Colors.BOLD}All done!{Colors.RESET} Every entry was copied.")
    else:
        print(f"  {Colors.YELLOW}⚠{Colors.RESET} Completed with {stats.files_failed} failures. Check log.")

    print(f"  {'─' * 60}")
    print()


def print_elapsed(elapsed: float) -> None:
    """Print the final timing line, in green where supported."""
    print(f"{Colors.GREEN}{Colors.BOLD}Whole operation took {human_duration(elapsed)}{Colors.RESET}")


class ProgressDisplay:
    """Real-time single-line progress bar.

    Renders ``[elapsed] bar pos/len speed`` in place once per second
    from a background thread. Does nothing when stdout is not a TTY.
    """

    REFRESH_INTERVAL = 1.0  # Seconds between updates

    def __init__(self, stats: "CopyStats", enabled: bool | None = None):
        self.stats = stats
        self.enabled = is_tty() if enabled is None else enabled

        self.lock = Lock()
        self.thread: Thread | None = None
        self.stop_event = Event()

    def start(self) -> None:
        """Start the progress display."""
        if not self.enabled:
            return
        self.stop_event.clear()
        print(Colors.HIDE_CURSOR, end="", flush=True)
        self.thread = Thread(target=self._run, daemon=True)
        self.thread.start()

    def stop(self) -> None:
        """Stop the progress display."""
        if not self.enabled:
            return
        self.stop_event.set()
        if self.thread:
            self.thread.join(timeout=2)
        self._render()  # Final render
        sys.stdout.write("\n" + Colors.SHOW_CURSOR)
        sys.stdout.flush()

    def _run(self) -> None:
        """Background update loop."""
        while not self.stop_event.is_set():
            self._render()
            # Use Event.wait for interruptible sleep
            self.stop_event.wait(self.REFRESH_INTERVAL)

    def render_line(self) -> str:
        """Build the progress line for the current stats."""
        elapsed = int(self.stats.elapsed_seconds)
        h, remainder = divmod(elapsed, 3600)
        m, s = divmod(remainder, 60)
        bar = make_bar(self.stats.progress_percent)
        return (
            f"[{h:02d}:{m:02d}:{s:02d}] {Colors.CYAN}{bar}{Colors.RESET} "
            f"{self.stats.files_processed:>7}/{self.stats.files_total:<7} "
            f"{human_speed(self.stats.speed_bps)}"
        )

    def _render(self) -> None:
        """Render the progress line in-place."""
        with self.lock:
            sys.stdout.write(f"\r\033[K{self.render_line()}")
            sys.stdout.flush()
