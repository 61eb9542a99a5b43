from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeRecord(BaseModel):
    """
    Data model representing the body of a server's /healthz response.

    All six fields are required. Counters are validated strictly, so a
    string or boolean in place of an integer fails validation.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    application: str
    version: str
    uptime: int
    request_count: int = Field(alias="requestCount", ge=0)
    error_count: int = Field(alias="errorCount", ge=0)
    success_count: int = Field(alias="successCount", ge=0)

    @property
    def key(self):
        """(application, version) pair used as the aggregation key."""
        return (self.application, self.version)

    def success_rate(self) -> Optional[float]:
        """
        Return success_count / request_count, or None when the server has
        not served any requests yet.
        """
        if self.request_count == 0:
            return None
        return self.success_count / self.request_count
