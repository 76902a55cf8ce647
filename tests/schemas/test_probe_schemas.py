"""Probe Schemas — camelCase serialization and omitted optional fields."""

from app.schemas.probes import (
    ComprehensiveProbeResult, StressProbeResult, SubTestResult,
)


def test_comprehensive_serializes_camel_case():
    result = ComprehensiveProbeResult(
        results=[SubTestResult(test="Simple SELECT", latency="3ms")],
        average_latency="3ms",
        timestamp="2025-01-01T00:00:00.000Z",
        railway_region="us-east4",
    )
    body = result.model_dump(by_alias=True)
    assert body["averageLatency"] == "3ms"
    assert body["railwayRegion"] == "us-east4"
    assert body["success"] is True


def test_stress_empty_run_drops_statistics():
    result = StressProbeResult(
        query_count=0, results=[], timestamp="2025-01-01T00:00:00.000Z",
    )
    body = result.model_dump(by_alias=True, exclude_none=True)
    assert body == {
        "success": True,
        "queryCount": 0,
        "results": [],
        "timestamp": "2025-01-01T00:00:00.000Z",
    }
