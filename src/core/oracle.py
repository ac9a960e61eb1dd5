"""Uniqueness oracles: read-only lookups telling whether a slug is in use.

An oracle answers ``exists(namespace, candidate)`` for one owner namespace.
It never writes; reserving a slug is left to the store's unique constraint.
"""

import asyncio
import os
from collections.abc import Iterable
from typing import Protocol

import aiohttp
from loguru import logger

from src.errors import OracleUnavailableError
from src.models.config import OracleConfig


class UniquenessOracle(Protocol):
    """
    Anything that can tell whether a slug is already used in a namespace.

    Implementations raise OracleUnavailableError for failures they can
    anticipate (bad responses, missing credentials). Timeouts and OSError
    are converted by query_oracle; other exceptions propagate as bugs.
    """

    async def exists(self, namespace: str, candidate: str) -> bool: ...


async def query_oracle(
    oracle: UniquenessOracle,
    namespace: str,
    candidate: str,
    timeout: float,
) -> bool:
    """
    Ask the oracle about one candidate, bounded by a timeout.

    Args:
        oracle: Uniqueness oracle
        namespace: Owner namespace
        candidate: Slug to look up
        timeout: Seconds before the query is abandoned

    Returns:
        True if the candidate is already used

    Raises:
        OracleUnavailableError: On timeout or connection failure, or when
            the oracle raises it itself
    """
    try:
        return await asyncio.wait_for(oracle.exists(namespace, candidate), timeout=timeout)
    except TimeoutError as e:
        logger.warning(f"Oracle query for {candidate!r} timed out after {timeout}s")
        raise OracleUnavailableError(
            f"Uniqueness query timed out after {timeout}s", candidate=candidate
        ) from e
    except OSError as e:
        logger.warning(f"Oracle query for {candidate!r} failed: {e}")
        raise OracleUnavailableError(f"Uniqueness query failed: {e}", candidate=candidate) from e


class InMemoryOracle:
    """Oracle over an in-process set of slugs per namespace.

    Records every query in ``queries`` so callers can inspect probe order.
    """

    def __init__(self, taken: dict[str, Iterable[str]] | None = None) -> None:
        self._taken: dict[str, set[str]] = {
            namespace: set(slugs) for namespace, slugs in (taken or {}).items()
        }
        self.queries: list[tuple[str, str]] = []

    def add(self, namespace: str, slug: str) -> None:
        self._taken.setdefault(namespace, set()).add(slug)

    async def exists(self, namespace: str, candidate: str) -> bool:
        self.queries.append((namespace, candidate))
        return candidate in self._taken.get(namespace, set())


class SupabaseOracle:
    """Oracle querying the components table through Supabase's REST API."""

    def __init__(self, config: OracleConfig, api_key: str, base_url: str | None = None) -> None:
        """
        Initialize the oracle.

        Args:
            config: Oracle configuration (table and column names)
            api_key: Supabase API key sent as ``apikey`` and bearer token
            base_url: Project URL overriding config.base_url
        """
        self.config = config
        self.base_url = (base_url or config.base_url).rstrip("/")
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    @classmethod
    def from_env(cls, config: OracleConfig) -> "SupabaseOracle":
        """
        Build an oracle from environment variables named in config.

        Raises:
            ValueError: If the API key variable is not set
        """
        api_key = os.getenv(config.api_key_env)
        if not api_key:
            raise ValueError(f"Environment variable {config.api_key_env} is not set")
        return cls(config, api_key=api_key, base_url=os.getenv(config.url_env))

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.config.table}"

    def _params(self, namespace: str, candidate: str) -> dict[str, str]:
        return {
            "select": "id",
            self.config.slug_column: f"eq.{candidate}",
            self.config.namespace_column: f"eq.{namespace}",
            "limit": "1",
        }

    async def exists(self, namespace: str, candidate: str) -> bool:
        """
        Look up candidate in the namespace.

        Raises:
            OracleUnavailableError: On HTTP, transport or payload errors
        """
        logger.debug(f"Querying {self.config.table} for slug {candidate!r} in {namespace!r}")

        try:
            async with (
                aiohttp.ClientSession(headers=self._headers) as session,
                session.get(self.endpoint, params=self._params(namespace, candidate)) as response,
            ):
                response.raise_for_status()
                rows = await response.json()
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(f"Slug lookup failed for {candidate!r}: {e}")
            raise OracleUnavailableError(f"Slug lookup failed: {e}", candidate=candidate) from e

        if not isinstance(rows, list):
            raise OracleUnavailableError(
                f"Unexpected response payload: {type(rows).__name__}", candidate=candidate
            )

        return len(rows) > 0
