from abc import ABC, abstractmethod


class ReportSink(ABC):
    """
    Abstract base class for collaborators that receive a finished report.
    """

    @abstractmethod
    def emit(self, report):
        """
        Publish the report.

        Args:
            report (Report): Aggregated report for the run.

        Raises:
            FleetHealthError: If publishing failed and the run must stop.
        """
