"""Turn-stamped log written both to a file and to standard output."""

import sys
import time


class Logger:
    """Writes each value prefixed with the current turn, pausing after each one."""

    def __init__(self, path, delay=2.0):
        self.path = path
        self.delay = delay
        self.turn = 0
        try:
            self._file = open(path, "w", encoding="utf-8")
        except OSError as error:
            raise ValueError("file could not be opened") from error

    def write(self, value):
        text = f"[{self.turn}] {value}"
        self._file.write(text)
        sys.stdout.write(text)
        if self.delay > 0:
            time.sleep(self.delay)
        return self

    def newline(self):
        self._file.write("\n")
        sys.stdout.write("\n")
        return self

    def next_turn(self):
        self.turn += 1
        return self

    def close(self):
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()