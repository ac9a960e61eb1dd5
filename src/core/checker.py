"""Live availability checking for user-typed slugs."""

import asyncio

from loguru import logger

from src.constants import INVALID_SLUG_MESSAGE, ORACLE_UNAVAILABLE_MESSAGE, TAKEN_SLUG_MESSAGE
from src.core.oracle import UniquenessOracle, query_oracle
from src.errors import OracleUnavailableError
from src.models.config import CheckerConfig
from src.models.slug import SlugCheckState
from src.utils.slug import is_valid_slug


class SlugAvailabilityChecker:
    """Tracks availability of a slug field as the user edits it.

    State is per instance, so independent forms never see each other's
    in-flight checks. Every check gets a request id and only the latest
    request may write state: a response arriving after a newer check has
    started is discarded. Stale requests are not cancelled.
    """

    def __init__(
        self,
        oracle: UniquenessOracle,
        namespace: str,
        config: CheckerConfig | None = None,
    ) -> None:
        """
        Initialize the checker.

        Args:
            oracle: Uniqueness oracle
            namespace: Owner namespace slugs are checked within
            config: Checker configuration (defaults if omitted)
        """
        self.oracle = oracle
        self.namespace = namespace
        self.config = config or CheckerConfig()
        self._state = SlugCheckState()
        self._request_id = 0
        self._input_id = 0
        self._pending: set[asyncio.Task[SlugCheckState]] = set()

    @property
    def state(self) -> SlugCheckState:
        return self._state.model_copy()

    def _is_current(self, request_id: int) -> bool:
        return request_id == self._request_id

    async def check(self, candidate: str) -> SlugCheckState:
        """
        Check candidate now and update state.

        Malformed candidates are rejected without querying the oracle.

        Args:
            candidate: Slug typed by the user

        Returns:
            State after this check (or after a newer one, if superseded)
        """
        if not self.config.enabled:
            return self.state

        self._request_id += 1
        request_id = self._request_id

        if not is_valid_slug(candidate):
            self._state = SlugCheckState(available=False, error=INVALID_SLUG_MESSAGE)
            return self.state

        self._state = SlugCheckState(checking=True)

        try:
            taken = await query_oracle(
                self.oracle,
                self.namespace,
                candidate,
                timeout=self.config.oracle_timeout_seconds,
            )
        except OracleUnavailableError as e:
            if self._is_current(request_id):
                logger.warning(f"Availability check for {candidate!r} failed: {e}")
                self._state = SlugCheckState(error=ORACLE_UNAVAILABLE_MESSAGE)
            return self.state

        if not self._is_current(request_id):
            logger.debug(f"Discarding stale availability result for {candidate!r}")
            return self.state

        self._state = SlugCheckState(
            available=not taken,
            error=TAKEN_SLUG_MESSAGE if taken else None,
        )
        return self.state

    def on_input(self, candidate: str) -> "asyncio.Task[SlugCheckState]":
        """
        Schedule a debounced check for a changed input value.

        Only the value that is still current once the debounce period has
        passed triggers an oracle query.

        Args:
            candidate: Current input value

        Returns:
            Task resolving to the state once this input has settled
        """
        self._input_id += 1
        task = asyncio.create_task(self._debounced_check(candidate, self._input_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _debounced_check(self, candidate: str, input_id: int) -> SlugCheckState:
        await asyncio.sleep(self.config.debounce_seconds)
        if input_id != self._input_id:
            return self.state
        return await self.check(candidate)

    async def settle(self) -> SlugCheckState:
        """Wait for all scheduled checks and return the final state."""
        while self._pending:
            await asyncio.gather(*self._pending)
        return self.state

    def reset(self) -> None:
        """Forget the current verdict; in-flight checks become stale."""
        self._request_id += 1
        self._input_id += 1
        self._state = SlugCheckState()
