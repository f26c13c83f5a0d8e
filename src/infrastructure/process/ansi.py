import re

# Terminal escape sequences, longest forms first so that a CSI or OSC is never
# cut short by the two-byte fallback.
ANSI_ESCAPE_PATTERN = re.compile(
    rb"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC (titles, hyperlinks)
    rb"|\x1b[PX^_][^\x1b]*\x1b\\"  # DCS / SOS / PM / APC
    rb"|\x1b\[[0-?]*[ -/]*[@-~]"  # CSI (colors, cursor movement)
    rb"|\x1b[ -/]+[0-~]"  # nF (charset selection, e.g. ESC ( B)
    rb"|\x1b[0-OQ-WYZ\\`-~]"  # Fp / Fe / Fs, minus the introducers above
)

# Longest unterminated escape held back between chunks
MAX_PENDING_ESCAPE = 4096


def strip_ansi(data: bytes) -> bytes:
    """Remove ANSI escape sequences from raw terminal output.

    Operates on bytes so it can run on chunks before UTF-8 decoding.
    """
    return ANSI_ESCAPE_PATTERN.sub(b"", data)


def incomplete_escape_start(data: bytes) -> int | None:
    """Index of the first ESC after the last complete sequence, if any."""
    end = 0
    for match in ANSI_ESCAPE_PATTERN.finditer(data):
        end = match.end()
    start = data.find(b"\x1b", end)
    return None if start == -1 else start


class AnsiStripper:
    """Strip escape sequences from a byte stream fed in arbitrary chunks.

    A trailing sequence that is not terminated yet is held back and stripped
    together with the next chunk, so a read boundary never leaves half of a
    sequence in the output.
    """

    def __init__(self, max_pending: int = MAX_PENDING_ESCAPE) -> None:
        self.max_pending = max_pending
        self._pending = b""

    def feed(self, chunk: bytes) -> bytes:
        data = self._pending + chunk
        start = incomplete_escape_start(data)
        if start is None or len(data) - start > self.max_pending:
            self._pending = b""
            return strip_ansi(data)
        self._pending = data[start:]
        return strip_ansi(data[:start])

    def finish(self) -> bytes:
        """Flush whatever is still held back at end of stream."""
        data, self._pending = self._pending, b""
        return strip_ansi(data)
