"""Results writing exports."""

from .report_models import BatchSummary, FileResult, OutputMode
from .result_reporter import ResultReporter, build_envelope, summarize

__all__ = [
    "BatchSummary",
    "FileResult",
    "OutputMode",
    "ResultReporter",
    "build_envelope",
    "summarize",
]
