from __future__ import annotations

import logging
import os
import socket
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8050
PORT_ATTEMPTS = 20


@dataclass(frozen=True)
class RuntimeSettings:
    """Process-level settings for the dev server, read from the environment"""
    port: int = DEFAULT_PORT
    debug: bool = False
    host: str = "0.0.0.0"
    config_root: Path = Path("config")

    @classmethod
    def from_env(cls, environ=None) -> RuntimeSettings:
        env = os.environ if environ is None else environ
        return cls(
            port=int(env.get("PORT", DEFAULT_PORT)),
            debug=env.get("DEBUG", "0") in ("1", "true", "True"),
            host=env.get("HOST", "0.0.0.0"),
            config_root=Path(env.get("STORE_BROWSER_CONFIG_ROOT", "config")),
        )


def _port_is_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def pick_port(preferred: int, host: str = "127.0.0.1", attempts: int = PORT_ATTEMPTS) -> int:
    """
    First bindable port in [preferred, preferred + attempts).

    Falls back to `preferred` when none is free so the server reports the
    bind error itself.
    """
    for port in range(preferred, preferred + attempts):
        if _port_is_free(host, port):
            if port != preferred:
                logger.warning("Port in use, moving on", extra={"requested": preferred, "port": port})
            return port
    return preferred
