"""Markdown logger for pointer events (presses, releases)."""

import datetime


class DragLogger:
    """Handles logging of drag events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the drag logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Drag Session Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Pointer Events\n\n")
                f.write("| Timestamp | Position (x,y) | Event | Details |\n")
                f.write("|-----------|---------------|-------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, pos: tuple[float, float], event: str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | ({pos[0]:g}, {pos[1]:g}) | {event} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_press(self, pos: tuple[float, float], grabbed: bool, details: str = "") -> None:
        """
        Log a pointer press.

        Parameters
        ----------
        pos : tuple[float, float]
            Pointer position (x, y)
        grabbed : bool
            Whether the press started a drag
        details : str, optional
            Additional details about the press
        """
        self._write_row(pos, "GRAB" if grabbed else "MISS", details)

    def log_release(self, pos: tuple[float, float], details: str = "") -> None:
        """Log a pointer release."""
        self._write_row(pos, "DROP", details)
