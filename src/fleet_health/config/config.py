import os


class Config:
    """
    Configuration class for environment variables and default settings.
    """

    SERVER_LIST_PATH = os.environ.get("SERVER_LIST_PATH", "server.txt")
    REPORT_PATH = os.environ.get("REPORT_PATH", "report.json")

    # Number of concurrent probe workers
    WORKER_COUNT = int(os.environ.get("WORKER_COUNT", "10"))

    # Addresses in the server list are bare host[:port]
    SERVER_SCHEME = os.environ.get("SERVER_SCHEME", "http")
    HEALTH_PATH = os.environ.get("HEALTH_PATH", "/healthz")

    # Matches the httpx client default
    PROBE_TIMEOUT = float(os.environ.get("PROBE_TIMEOUT", "5.0"))
