#!/usr/bin/env python3
"""Command line entry point for component slug tooling.

Commands:
- normalize: derive a slug from a display name
- validate: check a slug against the grammar
- resolve: find a free slug for a name in an owner's namespace
- check: check whether a user-chosen slug is free

Usage:
    python -m src.main normalize "My Button!!"
    python -m src.main resolve "My Button" --namespace user_123
    python -m src.main check my-button --namespace user_123 --offline --taken my-button
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from loguru import logger

from src.core.oracle import InMemoryOracle, SupabaseOracle, UniquenessOracle
from src.core.resolver import check_slug_available, resolve_unique_slug
from src.errors import InvalidFormatError, OracleUnavailableError, ResolutionExhaustedError
from src.models.config import AppConfig
from src.utils.config_loader import load_app_config
from src.utils.logging import setup_logging
from src.utils.retry import call_with_retry
from src.utils.slug import is_valid_slug, normalize_slug

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Generate, validate and resolve component slugs.")

EXIT_REJECTED = 1  # Invalid format or slug taken
EXIT_EXHAUSTED = 2
EXIT_UNAVAILABLE = 3

ConfigOption = Annotated[
    Path, typer.Option("--config", "-c", help="Path to slugs.yaml configuration")
]
NamespaceOption = Annotated[
    str, typer.Option("--namespace", "-n", help="Owner namespace (e.g. user id)")
]
OfflineOption = Annotated[
    bool, typer.Option("--offline", help="Use an in-memory oracle instead of Supabase")
]
TakenOption = Annotated[
    list[str] | None,
    typer.Option("--taken", "-t", help="Slug already used in the namespace (offline mode)"),
]
LogLevelOption = Annotated[
    str | None, typer.Option("--log-level", "-l", help="Override configured log level")
]


def _bootstrap(config_file: Path, log_level: str | None) -> AppConfig:
    """Load configuration and configure logging."""
    config = load_app_config(config_file)
    if log_level:
        config.logging.level = log_level.upper()  # type: ignore[assignment]
    setup_logging(config.logging)
    return config


def _build_oracle(
    config: AppConfig,
    namespace: str,
    offline: bool,
    taken: list[str] | None,
) -> UniquenessOracle:
    """Build the in-memory oracle (offline) or the Supabase oracle."""
    if offline or taken:
        logger.info(f"Using in-memory oracle with {len(taken or [])} taken slug(s)")
        return InMemoryOracle({namespace: taken or []})

    try:
        return SupabaseOracle.from_env(config.oracle)
    except ValueError as e:
        print(f"❌ {e}")
        raise typer.Exit(EXIT_UNAVAILABLE) from e


@app.command()
def normalize(name: Annotated[str, typer.Argument(help="Display name")]) -> None:
    """Print the slug derived from NAME (may be empty)."""
    print(normalize_slug(name))


@app.command()
def validate(slug: Annotated[str, typer.Argument(help="Slug to validate")]) -> None:
    """Exit 0 if SLUG matches the slug grammar, 1 otherwise."""
    if is_valid_slug(slug):
        print(f"✅ {slug}")
        return

    print(f"❌ Invalid slug format: {slug!r}")
    raise typer.Exit(EXIT_REJECTED)


@app.command()
def resolve(
    name: Annotated[str, typer.Argument(help="Display name to derive the slug from")],
    namespace: NamespaceOption,
    taken: TakenOption = None,
    offline: OfflineOption = False,
    config_file: ConfigOption = Path("config/slugs.yaml"),
    log_level: LogLevelOption = None,
) -> None:
    """Find a slug for NAME that is free in NAMESPACE."""
    config = _bootstrap(config_file, log_level)
    oracle = _build_oracle(config, namespace, offline, taken)

    try:
        result = asyncio.run(
            call_with_retry(
                lambda: resolve_unique_slug(name, oracle, namespace, config.resolver),
                config.retry,
            )
        )
    except InvalidFormatError as e:
        print(f"❌ {e}")
        raise typer.Exit(EXIT_REJECTED) from e
    except ResolutionExhaustedError as e:
        logger.error(str(e))
        print(f"❌ {e}")
        raise typer.Exit(EXIT_EXHAUSTED) from e
    except OracleUnavailableError as e:
        logger.error(f"Oracle unavailable: {e}")
        print(f"❌ {e}")
        raise typer.Exit(EXIT_UNAVAILABLE) from e

    logger.info(
        f"Resolved {name!r} to {result.slug!r} in {result.attempts} attempt(s)"
        + (" using fallback base" if result.fallback_used else "")
    )
    print(result.slug)


@app.command()
def check(
    slug: Annotated[str, typer.Argument(help="Slug chosen by the user")],
    namespace: NamespaceOption,
    taken: TakenOption = None,
    offline: OfflineOption = False,
    config_file: ConfigOption = Path("config/slugs.yaml"),
    log_level: LogLevelOption = None,
) -> None:
    """Exit 0 if SLUG is well-formed and free in NAMESPACE, 1 otherwise."""
    config = _bootstrap(config_file, log_level)
    oracle = _build_oracle(config, namespace, offline, taken)

    try:
        available = asyncio.run(
            call_with_retry(
                lambda: check_slug_available(
                    oracle, namespace, slug, config.checker.oracle_timeout_seconds
                ),
                config.retry,
            )
        )
    except InvalidFormatError as e:
        print(f"❌ {e}")
        raise typer.Exit(EXIT_REJECTED) from e
    except OracleUnavailableError as e:
        logger.error(f"Oracle unavailable: {e}")
        print(f"❌ {e}")
        raise typer.Exit(EXIT_UNAVAILABLE) from e

    if not available:
        print(f"❌ {slug} is already taken")
        raise typer.Exit(EXIT_REJECTED)

    print(f"✅ {slug} is available")


if __name__ == "__main__":
    app()
