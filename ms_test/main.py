"""
ms-test Microservice

Answers /health with a fixed liveness payload and every other path with a
timestamped greeting. Every request gets HTTP 200 and a JSON body.
"""

from fastapi import FastAPI, Depends, Request
import logging
import sys

from ms_test.config import Settings
from ms_test.server import Listener
from ms_test.services.dispatcher import Dispatcher, SERVICE_VERSION

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_dispatcher = Dispatcher()


def get_dispatcher() -> Dispatcher:
    return _dispatcher


def create_app() -> FastAPI:
    # No docs/openapi routes: /docs and friends must fall through to the greeting
    app = FastAPI(
        title="ms-test Microservice",
        description="Health check and greeting service",
        version=SERVICE_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.api_route("/{path:path}", methods=ALL_METHODS)
    async def dispatch(request: Request, dispatcher: Dispatcher = Depends(get_dispatcher)):
        """Serve the health payload for /health and the greeting for everything else"""
        return dispatcher.dispatch(request.scope["path"])

    return app


app = create_app()


def run() -> None:
    """Process entry point"""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )

    settings = Settings.from_env()
    Listener(app, settings).start()


if __name__ == "__main__":
    run()
