"""Latency Probes — timed, strictly sequential calls against the probe database.

Invariants:
    - Every external call is awaited before the next one starts (no gather, no tasks)
    - Start time taken immediately before the call, end time immediately after it resolves
    - Domain errors (QueryError values) are timed like any completed call
    - Any raised exception aborts the probe as a ProbeAbortedError subclass;
      the global error handler logs it, services do not
    - Comprehensive aborts carry completed results; stress aborts carry only a count

Design Decisions:
    - perf_counter (monotonic) for latencies, wall clock only for timestamps
    - Services return schema objects; routes stay free of timing logic
      (ADR: thin routes)
    - The comprehensive/stress asymmetry in partial reporting is kept as-is
"""

import logging
from time import perf_counter

from app.core.clock import utc_timestamp
from app.core.errors import (
    ComprehensiveProbeAbortedError, ProbeAbortedError, StressProbeAbortedError,
)
from app.core.latency import average_ms, elapsed_ms, format_ms, summarize
from app.infrastructure.supabase_client import ProbeDatabase
from app.schemas.probes import (
    ComprehensiveProbeResult, ConnectionProbeResult, StressProbeResult,
    StressStatistics, SubTestResult,
)

logger = logging.getLogger(__name__)

CONNECTION_NOTE = "Simple connection test"

SELECT_TEST = "Simple SELECT"
COUNT_TEST = "COUNT query"
AUTH_TEST = "Auth session check"


def _message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


async def run_connection_probe(
    db: ProbeDatabase, table: str,
) -> ConnectionProbeResult:
    """One bounded read; domain errors are a valid (200) outcome."""
    try:
        start = perf_counter()
        outcome = await db.query(table, "count", limit=1)
        latency = elapsed_ms(start, perf_counter())
    except Exception as e:
        raise ProbeAbortedError(_message(e), "connection") from e

    logger.info(
        "Connection probe completed",
        extra={"probe": "connection", "latency_ms": latency},
    )
    if outcome.error:
        return ConnectionProbeResult(
            success=False,
            error=outcome.error.message,
            latency=format_ms(latency),
            timestamp=utc_timestamp(),
        )
    return ConnectionProbeResult(
        success=True,
        latency=format_ms(latency),
        timestamp=utc_timestamp(),
        note=CONNECTION_NOTE,
    )


async def run_comprehensive_probe(
    db: ProbeDatabase, table: str, region: str,
) -> ComprehensiveProbeResult:
    """SELECT, COUNT, then auth session, in that order, each timed."""
    steps = (
        (SELECT_TEST, lambda: db.query(table, "id", limit=1)),
        (COUNT_TEST, lambda: db.query(table, "*", count="exact", head=True)),
        (AUTH_TEST, db.get_session),
    )
    completed: list[tuple[str, int]] = []

    try:
        for name, call in steps:
            start = perf_counter()
            outcome = await call()
            latency = elapsed_ms(start, perf_counter())
            if outcome.error:
                logger.warning(
                    f"{name} reported an error: {outcome.error.message}",
                    extra={"probe": "comprehensive", "latency_ms": latency},
                )
            completed.append((name, latency))
    except Exception as e:
        raise ComprehensiveProbeAbortedError(
            _message(e), [_sub_test(name, ms).model_dump() for name, ms in completed],
        ) from e

    average = average_ms([ms for _, ms in completed])
    logger.info(
        "Comprehensive probe completed",
        extra={"probe": "comprehensive", "latency_ms": average, "region": region},
    )
    return ComprehensiveProbeResult(
        results=[_sub_test(name, ms) for name, ms in completed],
        average_latency=format_ms(average),
        timestamp=utc_timestamp(),
        railway_region=region,
    )


def _sub_test(name: str, latency: int) -> SubTestResult:
    return SubTestResult(test=name, latency=format_ms(latency))


async def run_stress_probe(
    db: ProbeDatabase, table: str, count: int, warn_threshold: int,
) -> StressProbeResult:
    """count sequential bounded reads. count <= 0 is an empty run."""
    if count > warn_threshold:
        logger.warning(
            f"Stress probe count {count} exceeds {warn_threshold}; running anyway",
            extra={"probe": "stress", "query_count": count},
        )
    logger.info(f"Running {count} rapid queries...", extra={"query_count": count})

    latencies: list[int] = []
    try:
        for _ in range(count):
            start = perf_counter()
            await db.query(table, "id", limit=1)
            latencies.append(elapsed_ms(start, perf_counter()))
    except Exception as e:
        raise StressProbeAbortedError(_message(e), len(latencies)) from e

    stats = summarize(latencies)
    return StressProbeResult(
        query_count=count,
        results=[format_ms(ms) for ms in latencies],
        statistics=StressStatistics(**stats.to_payload()) if stats else None,
        timestamp=utc_timestamp(),
    )
