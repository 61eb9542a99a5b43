import asyncio
import logging
import sys

import httpx

from fleet_health.config.config import Config
from fleet_health.config.logging_config import setup_logging
from fleet_health.core.aggregator import aggregate
from fleet_health.core.errors import FleetHealthError
from fleet_health.core.health_probe import HealthProbe
from fleet_health.core.report_sinks import ConsoleReportSink, JsonFileReportSink
from fleet_health.core.server_list import read_server_list
from fleet_health.core.worker_pool import FailureLog, WorkerPool

logger = logging.getLogger(__name__)


def default_sinks(settings=Config):
    return [ConsoleReportSink(), JsonFileReportSink(settings.REPORT_PATH)]


async def run_report(settings=Config, sinks=None, transport=None, on_failure=None):
    """
    Poll every server in the server list and publish the aggregated report.

    Args:
        settings: Object exposing the Config attributes.
        sinks (list[ReportSink]): Report collaborators, console and JSON file
            by default.
        transport (httpx.AsyncBaseTransport): Optional transport for the
            shared HTTP client.
        on_failure: Diagnostics sink called with each ProbeFailure, a
            FailureLog by default.

    Returns:
        Report: The aggregated report.

    Raises:
        ConfigError: If the worker count is not positive.
        ServerListError: Before any probing, if the server list is unreadable.
        ReportWriteError: If a sink failed to persist the report.
    """
    servers = read_server_list(settings.SERVER_LIST_PATH)
    if on_failure is None:
        on_failure = FailureLog()

    async with httpx.AsyncClient(timeout=settings.PROBE_TIMEOUT, transport=transport) as client:
        probe = HealthProbe(client, scheme=settings.SERVER_SCHEME, health_path=settings.HEALTH_PATH)
        pool = WorkerPool(probe, worker_count=settings.WORKER_COUNT, on_failure=on_failure)
        records = await pool.run(servers)

    report = aggregate(records)
    logger.info(
        f"Run complete: {len(servers)} servers, {len(records)} succeeded, "
        f"{len(servers) - len(records)} failed, {len(report)} application versions"
    )

    if sinks is None:
        sinks = default_sinks(settings)
    for sink in sinks:
        sink.emit(report)
    return report


def main():
    setup_logging()
    try:
        asyncio.run(run_report())
    except FleetHealthError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
