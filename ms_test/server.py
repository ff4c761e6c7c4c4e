"""Listener - owns the bound socket and serves the app with uvicorn"""

import logging
import socket

import uvicorn
from fastapi import FastAPI

from ms_test.config import Settings
from ms_test.services.dispatcher import SERVICE_NAME

logger = logging.getLogger(__name__)


class ListenerStartupError(RuntimeError):
    """The listener could not bind its socket"""


class Listener:
    """Binds the configured port and runs uvicorn on it until the process is signalled"""

    def __init__(self, app: FastAPI, settings: Settings):
        self.app = app
        self.settings = settings

    def bind(self) -> socket.socket:
        """
        Bind a TCP socket to the configured host and port.

        Returns:
            The bound, listening socket

        Raises:
            ListenerStartupError: If the OS rejects the bind (port in use, permission denied)
        """
        host, port = self.settings.host, self.settings.port
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            sock.listen()
        except OSError as e:
            sock.close()
            logger.error(f"Failed to bind {host}:{port}: {e}", exc_info=True)
            raise ListenerStartupError(f"Cannot listen on {host}:{port}: {e}") from e
        return sock

    def start(self) -> None:
        """Bind, announce the port, then serve forever"""
        sock = self.bind()
        logger.info(f"{SERVICE_NAME} microservice running on port {self.settings.port}")

        config = uvicorn.Config(self.app, log_level="info")
        server = uvicorn.Server(config)
        server.run(sockets=[sock])
