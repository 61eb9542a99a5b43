from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VersionSummary(BaseModel):
    """
    Data model representing the success rate reported for one
    application version. A rate of None means the probe reported zero
    requests.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    application: str
    version: str
    success_rate: Optional[float] = Field(default=None, alias="successRate")

    def __repr__(self):
        return (
            f"VersionSummary(application={self.application}, version={self.version}, "
            f"success_rate={self.success_rate})"
        )
