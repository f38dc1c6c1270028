"""Incremental splitting of log output into lines."""

import codecs


class LineSplitter:
    """Buffers raw chunks and yields complete lines.

    Bytes are decoded incrementally as UTF-8, so a character split across
    two chunks is decoded once both halves have arrived.
    """

    def __init__(self) -> None:
        """Initialize with an empty buffer."""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Partial line waiting for its newline."""
        return self._buffer

    def feed(self, chunk: str | bytes) -> list[str]:
        """Add a chunk and return every line it completes.

        Args:
            chunk: Raw text or bytes from the log source.

        Returns:
            Complete lines in order, without their trailing newline.
        """
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._buffer += chunk

        lines: list[str] = []
        while (newline := self._buffer.find("\n")) != -1:
            lines.append(self._buffer[:newline])
            self._buffer = self._buffer[newline + 1 :]
        return lines
