"""Slug field behaviour of the component publish form.

The slug is prefilled from the component name (auto-generation path) until
the user edits it by hand, after which each edit is checked live
(manual-edit path).
"""

import asyncio

from loguru import logger

from src.constants import (
    AVAILABLE_SLUG_MESSAGE,
    CHECKING_SLUG_MESSAGE,
    OWNED_SLUG_MESSAGE,
    PLACEHOLDER_NAME,
)
from src.core.checker import SlugAvailabilityChecker
from src.core.oracle import UniquenessOracle
from src.core.resolver import resolve_unique_slug
from src.models.config import CheckerConfig, ResolverConfig
from src.models.slug import SlugCheckState, SlugFormState
from src.utils.slug import is_valid_slug, normalize_slug


class ComponentSlugForm:
    """Name and slug fields of one publish form."""

    def __init__(
        self,
        oracle: UniquenessOracle,
        namespace: str,
        resolver_config: ResolverConfig | None = None,
        checker_config: CheckerConfig | None = None,
        is_slug_read_only: bool = True,
    ) -> None:
        self.oracle = oracle
        self.namespace = namespace
        self.resolver_config = resolver_config or ResolverConfig()
        checker_config = checker_config or CheckerConfig()
        self.checker = SlugAvailabilityChecker(
            oracle,
            namespace,
            checker_config.model_copy(
                update={"enabled": checker_config.enabled and not is_slug_read_only}
            ),
        )
        self.state = SlugFormState(is_slug_read_only=is_slug_read_only)
        self._prefill_id = 0

    @property
    def check_state(self) -> SlugCheckState:
        return self.checker.state

    async def set_name(self, name: str) -> SlugFormState:
        """
        Update the component name and prefill the slug from it.

        The slug is left alone when it is read-only or was edited by hand.
        Only the latest call writes its result; a prefill that completes
        after a newer name or after a manual edit is dropped.

        Raises:
            OracleUnavailableError: If the uniqueness query fails
            ResolutionExhaustedError: If no free slug was found
        """
        self.state.name = name
        self._prefill_id += 1
        prefill_id = self._prefill_id

        if self.state.is_slug_read_only or self.state.is_slug_manually_edited:
            return self.state

        if not name.strip():
            self.state.component_slug = ""
            self.state.slug_available = None
            return self.state

        result = await resolve_unique_slug(name, self.oracle, self.namespace, self.resolver_config)

        # The slug may have been edited or the name retyped while resolving
        if self.state.is_slug_manually_edited or prefill_id != self._prefill_id:
            logger.debug(f"Discarding stale prefill {result.slug!r} for name {name!r}")
            return self.state

        self.state.component_slug = result.slug
        self.state.slug_available = True
        logger.debug(f"Prefilled slug {result.slug!r} from name {name!r}")
        return self.state

    def edit_slug(self, value: str) -> "asyncio.Task[SlugCheckState] | None":
        """
        Record a manual slug edit and schedule its availability check.

        Returns:
            The debounced check task, or None when the slug is read-only
        """
        if self.state.is_slug_read_only:
            return None

        self.state.is_slug_manually_edited = True
        self.state.component_slug = value
        self.state.slug_available = None
        self.checker.reset()
        return self.checker.on_input(value)

    def sync_availability(self) -> SlugFormState:
        """Copy the checker's verdict into the form's slug_available field."""
        available = self.checker.state.available
        if self.state.is_slug_manually_edited and self.state.slug_available != available:
            self.state.slug_available = available
        return self.state

    async def settle(self) -> SlugFormState:
        """Wait for pending checks, then sync their verdict into the form."""
        await self.checker.settle()
        return self.sync_availability()

    def status_message(self) -> str | None:
        """
        Status line shown under a manually edited, well-formed slug.

        A taken slug reads as one the owner already uses. Nothing is shown
        while availability is unknown (failed check).
        """
        check = self.checker.state
        slug = self.state.component_slug
        if not self.state.is_slug_manually_edited or not is_valid_slug(slug):
            return None
        if check.checking:
            return CHECKING_SLUG_MESSAGE
        if check.available is None:
            return None
        return AVAILABLE_SLUG_MESSAGE if check.available else OWNED_SLUG_MESSAGE

    @staticmethod
    def placeholder(name: str | None = None) -> str:
        """Example slug shown in the empty slug field."""
        return f'e.g. "{normalize_slug(name or PLACEHOLDER_NAME)}"'
