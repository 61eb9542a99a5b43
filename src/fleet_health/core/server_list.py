import logging
from pathlib import Path
from typing import List

from fleet_health.core.errors import ServerListError

logger = logging.getLogger(__name__)


def read_server_list(path) -> List[str]:
    """
    Read server addresses, one per line. Lines are whitespace-trimmed and
    blank lines are skipped.

    Raises:
        ServerListError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ServerListError(f"failed to read file {path}: {e}") from e

    servers = [line.strip() for line in text.splitlines()]
    servers = [s for s in servers if s]
    logger.info(f"Loaded {len(servers)} server addresses from {path}")
    return servers
