import logging

import httpx
from pydantic import ValidationError

from fleet_health.contracts.probe_record import ProbeRecord
from fleet_health.core.errors import ProbeFailure

logger = logging.getLogger(__name__)


class HealthProbe:
    """
    Issues a single health request to one server and parses the answer into
    a ProbeRecord.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        scheme: str = "http",
        health_path: str = "/healthz",
    ):
        """
        Initialize the HealthProbe.

        Args:
            client (httpx.AsyncClient): Client shared by every probe of a run.
            scheme (str): Scheme prepended to bare server addresses.
            health_path (str): Path of the health endpoint.
        """
        self.client = client
        self.scheme = scheme
        self.health_path = health_path

    def url_for(self, address: str) -> str:
        return f"{self.scheme}://{address}{self.health_path}"

    async def probe(self, address: str) -> ProbeRecord:
        """
        Probe one server. There is no retry.

        Raises:
            ProbeFailure: On an unusable address, a transport error, a non-200 status or a body
                that is not a valid health record.
        """
        url = self.url_for(address)
        try:
            resp = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProbeFailure(address, e) from e

        if resp.status_code != 200:
            raise ProbeFailure(
                address,
                f"non-200 response from {url}: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            record = ProbeRecord.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ProbeFailure(address, e, status_code=resp.status_code) from e

        logger.debug(
            f"Probe success for {address}: {record.application} {record.version}, "
            f"requests={record.request_count}, successes={record.success_count}"
        )
        return record

    async def __call__(self, address: str) -> ProbeRecord:
        return await self.probe(address)
