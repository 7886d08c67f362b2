"""
Client-side state for callers of the HTTP API.

Nothing in the served app uses this module. A presentation layer that calls
the catalog routes keeps one ``QueryState`` per search box or grid so that a
late response to a superseded query never replaces the current one.
"""
import logging
from enum import Enum
from typing import Awaitable, Callable

from catalog.models import Failure, NotFound

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class QueryState:
    """
    Tracks one search box or grid: idle -> loading -> success | empty | error.

    Every request is stamped with an increasing ticket. Only the outcome of the
    latest ticket is applied, so a slow response for an earlier page cannot
    overwrite the page the user moved to since.
    """

    def __init__(self):
        self.status = QueryStatus.IDLE
        self.outcome = None
        self._latest_ticket = 0

    @property
    def message(self) -> str | None:
        if isinstance(self.outcome, (NotFound, Failure)):
            return self.outcome.message
        return None

    def begin(self) -> int:
        self._latest_ticket += 1
        self.status = QueryStatus.LOADING
        return self._latest_ticket

    def resolve(self, ticket: int, outcome) -> bool:
        """Applies ``outcome`` if ``ticket`` is still current. Returns whether it was applied."""
        if ticket != self._latest_ticket:
            logger.debug(f"Discarding stale response for ticket {ticket} (latest is {self._latest_ticket})")
            return False
        self.outcome = outcome
        self.status = QueryStatus.SUCCESS if outcome.status == "success" else QueryStatus.ERROR
        return True

    def reset(self) -> None:
        # Also invalidates whatever is still in flight
        self._latest_ticket += 1
        self.status = QueryStatus.EMPTY
        self.outcome = None

    async def run(self, fetch: Callable[[], Awaitable]) -> bool:
        ticket = self.begin()
        try:
            outcome = await fetch()
        except Exception as e:
            # A raised fetch must not leave the query stuck in LOADING
            if ticket == self._latest_ticket:
                logger.error(f"Query for ticket {ticket} raised: {e}")
                self.status = QueryStatus.ERROR
                self.outcome = None
            raise
        return self.resolve(ticket, outcome)
