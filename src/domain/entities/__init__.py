from src.domain.entities.execution_report import ExecutionReport

__all__ = ["ExecutionReport"]
