################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the in-memory debug logger shared by the scaffold core and the preview UI.

'''

################################################################################################

import inspect
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

################################################################################################

TIME_FMT = "%m/%d/%Y %H:%M:%S"

def _now() -> str:
    return datetime.now().strftime(TIME_FMT)

def _caller_file(depth: int = 2) -> str:
    stack = inspect.stack()
    if len(stack) > depth:
        return Path(stack[depth].filename).name
    return "unknown"

################################################################################################

class LogManager():
    __log: Optional[List[Tuple[str, str]]] = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(_now(), "Begin TreeRow Log")]
        self.verbosity = verbosity

    def add(self, text: str):
        LogManager.__log.append((_now(), text))

    def enabled(self, level: int) -> bool:
        return self.verbosity >= level

    def debug(self, text: str, level: int = 0):
        # Skip the stack walk entirely when nobody is listening
        if not self.enabled(level):
            return
        self.add(f"[{_caller_file()}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def count(self) -> int:
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Drop every entry except a marker noting the clear."""
        LogManager.__log.clear()
        LogManager.__log.append((_now(), "Log cleared"))

    def write_to_file(self, filepath: str) -> bool:
        """Dump all entries to *filepath*; returns False (and logs why) on failure."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")
            return False
        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()

################################################################################################
