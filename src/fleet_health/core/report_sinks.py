import json
import logging
import sys
from pathlib import Path

from fleet_health.abstractions.report_sink import ReportSink
from fleet_health.core.errors import ReportWriteError

logger = logging.getLogger(__name__)


def format_summary(summary) -> str:
    if summary.success_rate is None:
        rate = "n/a"
    else:
        rate = f"{summary.success_rate * 100:.2f}%"
    return f"Application: {summary.application}, Version: {summary.version}, Success Rate: {rate}"


class ConsoleReportSink(ReportSink):
    """
    Prints one line per application version, ordered by application then
    version.
    """

    def __init__(self, stream=None):
        self.stream = stream

    def emit(self, report):
        stream = self.stream or sys.stdout
        for application in report.applications():
            for version in report.versions(application):
                print(format_summary(report.get(application, version)), file=stream)


class JsonFileReportSink(ReportSink):
    """
    Writes the report as indented JSON, replacing any previous file.
    """

    def __init__(self, path):
        self.path = Path(path)

    def render(self, report) -> str:
        return json.dumps(report.to_nested(), indent=2, sort_keys=True)

    def emit(self, report):
        try:
            self.path.write_text(self.render(report) + "\n", encoding="utf-8")
        except OSError as e:
            raise ReportWriteError(f"failed to write report to file {self.path}: {e}") from e
        logger.info(f"Report saved to {self.path}")
