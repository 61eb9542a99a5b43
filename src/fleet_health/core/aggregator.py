import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from fleet_health.contracts.probe_record import ProbeRecord
from fleet_health.contracts.version_summary import VersionSummary
from fleet_health.core.profiler import Profiler

logger = logging.getLogger(__name__)

SummaryKey = Tuple[str, str]


class Report:
    """
    Per-(application, version) success rates for one run.

    Summaries are kept in a flat mapping keyed by the (application, version)
    tuple; the nested application -> version shape only exists in
    to_nested(), for serialization.
    """

    def __init__(self, summaries: Optional[Dict[SummaryKey, VersionSummary]] = None):
        self._summaries = dict(summaries or {})

    @property
    def summaries(self) -> Mapping[SummaryKey, VersionSummary]:
        return MappingProxyType(self._summaries)

    def get(self, application: str, version: str) -> Optional[VersionSummary]:
        return self._summaries.get((application, version))

    def applications(self):
        return sorted({app for app, _ in self._summaries})

    def versions(self, application: str):
        return sorted(v for app, v in self._summaries if app == application)

    def __len__(self):
        return len(self._summaries)

    def __iter__(self) -> Iterator[VersionSummary]:
        return iter(self._summaries.values())

    def __contains__(self, key):
        return key in self._summaries

    def __eq__(self, other):
        if not isinstance(other, Report):
            return NotImplemented
        return self._summaries == other._summaries

    def to_nested(self) -> Dict[str, Dict[str, dict]]:
        """
        Return {application: {version: {application, version, successRate}}}.
        """
        nested: Dict[str, Dict[str, dict]] = {}
        for (app, version), summary in self._summaries.items():
            nested.setdefault(app, {})[version] = summary.model_dump(by_alias=True)
        return nested

    @classmethod
    def from_nested(cls, nested: Mapping[str, Mapping[str, dict]]) -> "Report":
        summaries = {}
        for versions in nested.values():
            for leaf in versions.values():
                summary = VersionSummary.model_validate(leaf)
                summaries[(summary.application, summary.version)] = summary
        return cls(summaries)


@Profiler.profile
def aggregate(records: Iterable[ProbeRecord]) -> Report:
    """
    Fold probe records into a Report.

    Each record overwrites the summary for its (application, version): the
    last record processed wins, rates are not averaged across servers
    reporting the same version. A record with zero requests yields a rate
    of None.
    """
    summaries: Dict[SummaryKey, VersionSummary] = {}
    for record in records:
        if record.key in summaries:
            logger.debug(f"Overwriting summary for {record.application} {record.version}")
        summaries[record.key] = VersionSummary(
            application=record.application,
            version=record.version,
            success_rate=record.success_rate(),
        )
    return Report(summaries)
