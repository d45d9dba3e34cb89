# output.py

import sys
from typing import List, Optional, Protocol, TextIO


class OutputSink(Protocol):
    """Receives finished markup lines and emits them."""
    def write(self, line: str) -> None: ...


class StreamOutput:
    """Writes each line, followed by a newline, to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so a swapped sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str) -> None:
        """Write line to the stream and flush it."""
        try:
            self.stream.write(line)
            self.stream.write("\n")
            self.stream.flush()
        except BrokenPipeError:
            pass  # Ignore pipe errors


class BufferedOutput:
    """Keeps written lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def fetch(self) -> str:
        """Return everything written so far as one string and clear the buffer."""
        content = "".join(f"{line}\n" for line in self.lines)
        self.lines = []
        return content
