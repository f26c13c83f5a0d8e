from src.infrastructure.process.ansi import AnsiStripper, strip_ansi
from src.infrastructure.process.process_supervisor import ProcessSupervisor
from src.infrastructure.process.stream_relay import StreamRelay

__all__ = ["AnsiStripper", "ProcessSupervisor", "StreamRelay", "strip_ansi"]
