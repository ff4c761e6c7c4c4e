"""Process configuration loaded once from the environment"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
MIN_PORT = 1
MAX_PORT = 65535


def parse_port(raw: Optional[str], default: int = DEFAULT_PORT) -> int:
    """
    Parse a TCP port from an environment value.

    Args:
        raw: Raw value of the PORT variable, or None if unset
        default: Port used when the value is missing or unusable

    Returns:
        Port number in the range 1-65535
    """
    if raw is None or not raw.strip():
        return default

    try:
        port = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric PORT value {raw!r}, using {default}")
        return default

    if not MIN_PORT <= port <= MAX_PORT:
        logger.warning(f"Ignoring out-of-range PORT value {port}, using {default}")
        return default

    return port


class Settings(BaseModel):
    """Immutable service settings"""
    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, ge=MIN_PORT, le=MAX_PORT, description="TCP port to listen on")
    host: str = Field(default="0.0.0.0", description="Interface the listener binds to")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from the environment (os.environ unless given)"""
        if environ is None:
            environ = os.environ
        return cls(port=parse_port(environ.get("PORT")))
