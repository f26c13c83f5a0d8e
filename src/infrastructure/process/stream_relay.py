from typing import BinaryIO, Protocol

from loguru import logger

from src.infrastructure.process.ansi import AnsiStripper

CHUNK_SIZE = 1024


class ByteSource(Protocol):
    async def read(self, n: int = -1) -> bytes: ...


class StreamRelay:
    """Forward one child output stream to a local sink while capturing it.

    Every chunk is written and flushed to the sink as soon as it is read, so
    the user sees output live. An ANSI-stripped copy is accumulated and
    returned once the stream ends.

    If the sink fails, the source is still drained to EOF so the child never
    blocks on a full pipe; the sink error is raised afterwards.
    """

    def __init__(
        self,
        source: ByteSource,
        sink: BinaryIO,
        name: str = "stream",
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        self.source = source
        self.sink = sink
        self.name = name
        self.chunk_size = chunk_size

    async def _read(self) -> bytes:
        try:
            return await self.source.read(self.chunk_size)
        except OSError as e:
            # Best effort: stop capturing, keep what was already forwarded
            logger.debug("Relay for {} stopped on read error: {}", self.name, e)
            return b""

    async def _drain(self) -> int:
        discarded = 0
        while chunk := await self._read():
            discarded += len(chunk)
        return discarded

    async def run(self) -> str:
        captured = bytearray()
        stripper = AnsiStripper()

        while chunk := await self._read():
            try:
                self.sink.write(chunk)
                self.sink.flush()
            except (OSError, ValueError) as e:
                logger.error("Relay for {} cannot write to its sink: {}", self.name, e)
                discarded = await self._drain()
                logger.debug("Relay for {} discarded {} bytes after sink failure", self.name, discarded)
                raise
            captured += stripper.feed(chunk)

        captured += stripper.finish()
        logger.debug("Relay for {} finished, captured {} bytes", self.name, len(captured))
        return captured.decode("utf-8", errors="replace")
