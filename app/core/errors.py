"""Error Hierarchy — typed, categorized exceptions for probe failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces {success: false, error, ..., timestamp}
    - Domain errors reported by the database are NOT exceptions (see QueryError
      in infrastructure/supabase_client.py); only aborted calls raise

Design Decisions:
    - Single hierarchy with LatencyProbeError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Partial progress travels on the exception itself (results / completed count)
      so the handler can render it without reaching back into the service
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from app.core.clock import format_timestamp


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    PROBE = "probe"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class LatencyProbeError(Exception):
    """Base exception for all latency probe errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def partial_progress(self) -> dict[str, Any]:
        """Extra payload fields describing work completed before the failure."""
        return {}

    def to_response(self) -> dict:
        """Convert to the probe failure envelope."""
        return {
            "success": False,
            "error": self.message,
            **self.partial_progress(),
            "timestamp": format_timestamp(self.timestamp),
        }


# ─── Probe Errors (500-level) ───────────────────────────────────

class ProbeAbortedError(LatencyProbeError):
    """A database call raised instead of returning a result."""
    def __init__(self, message: str, probe: str):
        super().__init__(
            message, "PROBE_ABORTED", ErrorCategory.PROBE,
            ErrorSeverity.ERROR, 500,
        )
        self.probe = probe


class ComprehensiveProbeAbortedError(ProbeAbortedError):
    """Comprehensive probe aborted; carries the sub-test results completed so far."""
    def __init__(self, message: str, results: list[dict[str, str]]):
        super().__init__(message, "comprehensive")
        self.results = results
        self.completed = len(results)

    def partial_progress(self) -> dict[str, Any]:
        return {"results": self.results}


class StressProbeAbortedError(ProbeAbortedError):
    """Stress probe aborted; carries only the number of completed queries."""
    def __init__(self, message: str, completed: int):
        super().__init__(message, "stress")
        self.completed = completed

    def partial_progress(self) -> dict[str, Any]:
        return {"completedQueries": self.completed}


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseNotConfiguredError(LatencyProbeError):
    """Supabase client could not be built from the current configuration."""
    def __init__(self, reason: str):
        super().__init__(
            f"Supabase client is not configured: {reason}",
            "DATABASE_NOT_CONFIGURED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
        self.reason = reason
