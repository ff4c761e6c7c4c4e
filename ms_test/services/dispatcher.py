"""Request dispatcher - maps a request path to its JSON payload"""

from datetime import datetime, timezone
from typing import Callable, Dict, Union

from ms_test.models.greeting import GreetingResponse
from ms_test.models.health import HealthResponse

SERVICE_NAME = "ms-test"
SERVICE_VERSION = "1.0.1"
GREETING_MESSAGE = f"Hello from {SERVICE_NAME} microservice!"

HEALTH_PATH = "/health"

Payload = Union[HealthResponse, GreetingResponse]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision, e.g. 2026-10-19T03:54:12.345Z"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


class Dispatcher:
    """Stateless mapping from request path to response payload"""

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock
        self.routes: Dict[str, Callable[[], Payload]] = {
            HEALTH_PATH: self.health,
        }

    def health(self) -> HealthResponse:
        return HealthResponse(status="healthy", service=SERVICE_NAME)

    def greeting(self) -> GreetingResponse:
        return GreetingResponse(
            message=GREETING_MESSAGE,
            version=SERVICE_VERSION,
            timestamp=format_timestamp(self.clock()),
        )

    def dispatch(self, path: str) -> Payload:
        """
        Build the payload for a request path.

        Only the exact path "/health" selects the health payload; every other
        path, including "/health/" and "/Health", gets the greeting.

        Args:
            path: URL path with any query string already removed

        Returns:
            HealthResponse or GreetingResponse
        """
        handler = self.routes.get(path, self.greeting)
        return handler()
