"""Automatic slug resolution by linear suffix probing.

Given a display name, derive a base slug and probe ``base``, ``base-1``,
``base-2``, ... against a uniqueness oracle until one is reported free.
The result is only a hint: two concurrent resolutions may return the same
slug, the insert itself must be guarded by the store's unique constraint.
"""

from collections.abc import Iterator
from itertools import islice

from loguru import logger

from src.core.oracle import UniquenessOracle, query_oracle
from src.errors import InvalidFormatError, ResolutionExhaustedError
from src.models.config import ResolverConfig
from src.models.slug import CandidateIdentifier, ResolutionAttempt, ResolutionResult
from src.utils.slug import transliterate_slug, validate_slug


def resolve_base(name: str, config: ResolverConfig) -> tuple[str, bool]:
    """
    Derive the base slug for a name, applying the fallback policy if needed.

    Args:
        name: Display name
        config: Resolver configuration

    Returns:
        Tuple of (base slug, fallback_used)

    Raises:
        InvalidFormatError: If no base can be derived and the fallback is disabled
    """
    candidate = CandidateIdentifier.from_name(name)
    if not candidate.is_empty:
        return candidate.normalized, False

    if config.transliterate_fallback:
        transliterated = transliterate_slug(name)
        if transliterated:
            logger.debug(f"Using transliterated base {transliterated!r} for {name!r}")
            return transliterated, True

    if config.fallback_base is None:
        raise InvalidFormatError(name)

    logger.debug(f"Name {name!r} yields no slug, using fallback {config.fallback_base!r}")
    return config.fallback_base, True


def iter_attempts(base: str) -> Iterator[ResolutionAttempt]:
    """Yield base, base-1, base-2, ... without end."""
    yield ResolutionAttempt(base=base)
    suffix = 1
    while True:
        yield ResolutionAttempt(base=base, suffix=suffix)
        suffix += 1


async def resolve_unique_slug(
    name: str,
    oracle: UniquenessOracle,
    namespace: str,
    config: ResolverConfig | None = None,
) -> ResolutionResult:
    """
    Resolve a slug for name that the oracle reports as free in namespace.

    Args:
        name: Display name to derive the slug from
        oracle: Uniqueness oracle
        namespace: Owner namespace uniqueness is checked within
        config: Resolver configuration (defaults if omitted)

    Returns:
        ResolutionResult with the free slug and the number of queries issued

    Raises:
        InvalidFormatError: If the name yields no slug and no fallback applies
        OracleUnavailableError: If a query times out or fails
        ResolutionExhaustedError: If config.max_attempts queries all hit taken slugs
    """
    config = config or ResolverConfig()
    base, fallback_used = resolve_base(name, config)

    bounded = islice(iter_attempts(base), config.max_attempts)
    for attempts, attempt in enumerate(bounded, start=1):
        taken = await query_oracle(
            oracle, namespace, attempt.slug, timeout=config.oracle_timeout_seconds
        )
        if not taken:
            logger.debug(f"Resolved {name!r} to {attempt.slug!r} after {attempts} attempt(s)")
            return ResolutionResult(
                slug=attempt.slug,
                base=base,
                attempts=attempts,
                fallback_used=fallback_used,
            )

        logger.debug(f"Slug {attempt.slug!r} is taken in {namespace!r}")

    logger.warning(f"Giving up on base {base!r} after {config.max_attempts} attempts")
    raise ResolutionExhaustedError(base, config.max_attempts)


async def check_slug_available(
    oracle: UniquenessOracle,
    namespace: str,
    slug: str,
    timeout: float,
) -> bool:
    """
    Check a user-supplied slug once, without probing suffixes.

    Args:
        oracle: Uniqueness oracle
        namespace: Owner namespace
        slug: Candidate slug
        timeout: Oracle query timeout in seconds

    Returns:
        True if the slug is free

    Raises:
        InvalidFormatError: If the slug is malformed (no query is made)
        OracleUnavailableError: If the query times out or fails
    """
    validate_slug(slug)
    taken = await query_oracle(oracle, namespace, slug, timeout=timeout)
    return not taken
