"""Run execution domain exports."""

from .run_contracts import ExitCode, RunOutcome, RunRequest
from .validation_run_use_case import RunExecutionError, execute_validation_run

__all__ = [
    "ExitCode",
    "RunExecutionError",
    "RunOutcome",
    "RunRequest",
    "execute_validation_run",
]
