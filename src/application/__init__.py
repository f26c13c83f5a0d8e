from src.application.use_cases.run_and_report import RunAndReport, RunOutcome

__all__ = ["RunAndReport", "RunOutcome"]
