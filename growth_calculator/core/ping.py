"""Ping utility used by the API health-check."""

from growth_calculator.domain.series import SeriesStore
from growth_calculator.schemas.ping import PingResponse


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def build_ping_response(service_name: str, store: SeriesStore) -> PingResponse:
    """Health payload including how much NAV history was loaded."""
    return PingResponse(
        message=get_ping_message(),
        service=service_name,
        nav_observations=len(store.navs),
    )
