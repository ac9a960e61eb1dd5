"""Shared pytest fixtures and configuration."""

import asyncio
from pathlib import Path

import pytest

from src.core.oracle import InMemoryOracle
from src.models.config import CheckerConfig, ResolverConfig


class ControlledOracle:
    """Oracle whose answers are released by the test, in any order."""

    def __init__(self) -> None:
        self.queries: list[tuple[str, str]] = []
        self._responses: dict[str, asyncio.Future[bool]] = {}

    def _future(self, candidate: str) -> "asyncio.Future[bool]":
        if candidate not in self._responses:
            self._responses[candidate] = asyncio.get_running_loop().create_future()
        return self._responses[candidate]

    async def exists(self, namespace: str, candidate: str) -> bool:
        self.queries.append((namespace, candidate))
        return await self._future(candidate)

    def respond(self, candidate: str, exists: bool) -> None:
        self._future(candidate).set_result(exists)

    def fail(self, candidate: str, exc: BaseException) -> None:
        self._future(candidate).set_exception(exc)


class SlowOracle:
    """Oracle that never answers within a short timeout."""

    def __init__(self, delay: float = 1.0) -> None:
        self.delay = delay
        self.queries: list[tuple[str, str]] = []

    async def exists(self, namespace: str, candidate: str) -> bool:
        self.queries.append((namespace, candidate))
        await asyncio.sleep(self.delay)
        return False


class BrokenOracle:
    """Oracle whose transport always fails."""

    def __init__(self) -> None:
        self.queries: list[tuple[str, str]] = []

    async def exists(self, namespace: str, candidate: str) -> bool:
        self.queries.append((namespace, candidate))
        raise ConnectionError("connection refused")


@pytest.fixture
def namespace() -> str:
    """Owner namespace used across tests."""
    return "user_123"


@pytest.fixture
def empty_oracle() -> InMemoryOracle:
    """Oracle with no taken slugs."""
    return InMemoryOracle()


@pytest.fixture
def button_oracle(namespace: str) -> InMemoryOracle:
    """Oracle where my-button and my-button-1 are taken in the test namespace."""
    return InMemoryOracle({namespace: ["my-button", "my-button-1"]})


@pytest.fixture
def controlled_oracle() -> ControlledOracle:
    """Oracle answered manually by the test."""
    return ControlledOracle()


@pytest.fixture
def slow_oracle() -> SlowOracle:
    """Oracle slower than the short test timeout."""
    return SlowOracle()


@pytest.fixture
def broken_oracle() -> BrokenOracle:
    """Oracle that raises a transport error."""
    return BrokenOracle()


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """Resolver configuration with a short oracle timeout."""
    return ResolverConfig(max_attempts=50, oracle_timeout_seconds=0.2)


@pytest.fixture
def checker_config() -> CheckerConfig:
    """Checker configuration with a tiny debounce period."""
    return CheckerConfig(enabled=True, debounce_seconds=0.01, oracle_timeout_seconds=0.2)


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir
