"""
Output Sink
===========

The single output boundary for encoded frames.

Design Rules:
    - One stream write (plus flush) per frame set
    - Thread-safe: whole frame sets are serialized, never interleaved
    - Does NOT inspect or modify frames
"""

import logging
import sys
import threading
from typing import Iterable, Optional, TextIO


logger = logging.getLogger(__name__)


class OutputSink:
    """
    Serialized writer around a text stream.
    
    Attributes:
        writes: Number of write calls performed
        
    Example:
        sink = OutputSink()           # sys.stdout
        sink.write(frames)            # one write + flush
        sink.write_lines([a, b])      # "a\\nb\\n" in one write
    """
    
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """
        Initialize sink.
        
        Args:
            stream: Target text stream. None resolves sys.stdout at write time.
        """
        self._stream = stream
        self._lock = threading.Lock()
        self._writes: int = 0
    
    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout
    
    @property
    def writes(self) -> int:
        return self._writes
    
    def write(self, data: str) -> None:
        """Write `data` as one unit and flush."""
        with self._lock:
            stream = self.stream
            stream.write(data)
            stream.flush()
            self._writes += 1
        logger.debug(f"Wrote {len(data)} chars to output")
    
    def write_lines(self, lines: Iterable[str]) -> None:
        """Write newline-terminated lines as one unit."""
        self.write("".join(f"{line}\n" for line in lines))
