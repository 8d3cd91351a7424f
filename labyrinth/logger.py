"""Logging module for Labyrinth."""

import json
import sys
from datetime import datetime
from typing import Callable, Optional


class Logger:
    """Logs search progress to the console and an optional file"""

    def __init__(self, log_path: Optional[str] = None, callback: Optional[Callable] = None,
                 echo: bool = True):
        self.log_path = log_path
        self.callback = callback
        self.echo = echo
        self.file = None
        self._progress_shown = False
        if log_path:
            self.file = open(log_path, "a")
            self._write_header()

    def _write_header(self):
        if self.file:
            self.file.write(f"\n{'='*60}\n")
            self.file.write(f"Labyrinth Log - {datetime.now().isoformat()}\n")
            self.file.write(f"{'='*60}\n\n")
            self.file.flush()

    def log(self, message: str, data: Optional[dict] = None):
        """Log a message with optional structured data"""
        timestamp = datetime.now().isoformat()
        line = f"[{timestamp}] {message}"
        if data:
            line += f" | {json.dumps(data)}"
        if self.echo:
            self._end_progress()
            print(line)
        if self.file:
            self.file.write(line + "\n")
            self.file.flush()
        if self.callback:
            self.callback(message, data)

    def progress(self, message: str):
        """Overwrite a single console status line"""
        if self.echo:
            sys.stdout.write(f"\r{message}")
            sys.stdout.flush()
            self._progress_shown = True

    def _end_progress(self):
        if self._progress_shown:
            sys.stdout.write("\n")
            self._progress_shown = False

    def close(self):
        self._end_progress()
        if self.file:
            self.file.close()
            self.file = None
