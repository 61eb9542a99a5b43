class FleetHealthError(Exception):
    """Base class for errors that end a report run."""


class ConfigError(FleetHealthError, ValueError):
    """A setting holds a value the tool cannot run with."""


class ServerListError(FleetHealthError):
    """The server list could not be read."""


class ReportWriteError(FleetHealthError):
    """The persisted report could not be written."""


class ProbeFailure(Exception):
    """
    A single server could not be probed. Carries the server address and the
    underlying cause; never fatal to the run.
    """

    def __init__(self, address, cause, status_code=None):
        self.address = address
        self.cause = cause
        self.status_code = status_code
        super().__init__(f"{address}: {cause}")
