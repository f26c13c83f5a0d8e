from src.domain.ports.notifier_port import NotificationError, NotifierPort
from src.domain.ports.process_runner_port import ProcessRunnerPort, RelayError, SpawnError

__all__ = [
    # Notifier port
    "NotificationError",
    "NotifierPort",
    # Process runner port
    "ProcessRunnerPort",
    "RelayError",
    "SpawnError",
]
