import asyncio
import logging
from typing import Awaitable, Callable, Iterable, List, Optional

from fleet_health.contracts.probe_record import ProbeRecord
from fleet_health.core.errors import ConfigError, ProbeFailure
from fleet_health.core.profiler import Profiler

logger = logging.getLogger(__name__)

ProbeFn = Callable[[str], Awaitable[ProbeRecord]]
FailureSink = Callable[[ProbeFailure], None]


class FailureLog:
    """
    Diagnostics sink that keeps every probe failure of a run.
    """

    def __init__(self):
        self.failures: List[ProbeFailure] = []

    def __call__(self, failure: ProbeFailure):
        self.failures.append(failure)

    def __len__(self):
        return len(self.failures)

    @property
    def addresses(self):
        return [f.address for f in self.failures]


class WorkerPool:
    """
    Fixed number of concurrent workers draining a shared queue of server
    addresses. Successful probes land on a results queue; failures are
    logged, handed to the diagnostics sink and dropped.
    """

    def __init__(
        self,
        probe: ProbeFn,
        worker_count: int = 10,
        on_failure: Optional[FailureSink] = None,
    ):
        if worker_count < 1:
            raise ConfigError(f"worker_count must be at least 1, got {worker_count}")
        self.probe = probe
        self.worker_count = worker_count
        self.on_failure = on_failure

    async def _worker(self, worker_id, work, results):
        while True:
            try:
                address = work.get_nowait()
            except asyncio.QueueEmpty:
                logger.debug(f"Worker {worker_id} found the queue empty, exiting")
                return
            try:
                record = await self.probe(address)
            except ProbeFailure as failure:
                logger.warning(f"Error querying server {address}: {failure.cause}")
                if self.on_failure is not None:
                    self.on_failure(failure)
            else:
                results.put_nowait(record)
            finally:
                work.task_done()

    @Profiler.profile
    async def run(self, addresses: Iterable[str]) -> List[ProbeRecord]:
        """
        Probe every address exactly once.

        Args:
            addresses (Iterable[str]): Server addresses, duplicates allowed.

        Returns:
            List[ProbeRecord]: One record per successful probe, in no
            particular order.
        """
        work: asyncio.Queue = asyncio.Queue()
        for address in addresses:
            work.put_nowait(address)
        results: asyncio.Queue = asyncio.Queue()

        total = work.qsize()
        logger.info(f"Probing {total} servers with {self.worker_count} workers")

        workers = [
            asyncio.create_task(self._worker(i, work, results))
            for i in range(self.worker_count)
        ]
        try:
            await asyncio.gather(*workers)
        finally:
            for task in workers:
                task.cancel()

        records = []
        while not results.empty():
            records.append(results.get_nowait())
        logger.info(f"Probed {total} servers: {len(records)} succeeded, {total - len(records)} failed")
        return records
