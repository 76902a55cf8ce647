"""Probe Schemas — response contracts for the latency endpoints.

Invariants:
    - JSON keys are camelCase (averageLatency, railwayRegion, queryCount) via aliases
    - Latencies are serialized as "<n>ms" strings
    - Optional fields are omitted, not null (routes use response_model_exclude_none)

Design Decisions:
    - Failure envelopes (500) are not modeled here: they are rendered from
      LatencyProbeError.to_response() by the global error handler
"""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ServerInfo(BaseModel):
    """GET /: static server info."""
    message: str
    timestamp: str
    region: str


class ConnectionProbeResult(BaseModel):
    """GET /test/connection: success, or a domain error with latency."""
    success: bool
    error: str | None = None
    latency: str
    timestamp: str
    note: str | None = None


class SubTestResult(BaseModel):
    """One timed step of the comprehensive probe."""
    test: str
    latency: str


class ComprehensiveProbeResult(_CamelModel):
    success: bool = True
    results: list[SubTestResult]
    average_latency: str = Field(alias="averageLatency")
    timestamp: str
    railway_region: str = Field(alias="railwayRegion")


class StressStatistics(BaseModel):
    average: str
    min: str
    max: str


class StressProbeResult(_CamelModel):
    """GET /test/stress: statistics omitted for empty runs."""
    success: bool = True
    query_count: int = Field(alias="queryCount")
    results: list[str]
    statistics: StressStatistics | None = None
    timestamp: str


class NetworkInfo(_CamelModel):
    """GET /test/network: reflected request metadata."""
    headers: dict[str, str]
    ip: str | None
    ips: list[str]
    hostname: str | None
    railway_region: str = Field(alias="railwayRegion")
    timestamp: str
