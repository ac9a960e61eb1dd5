"""Application-wide constants.

Contains configuration constants used across the codebase to avoid magic numbers
and maintain consistency.
"""

# Slug Grammar
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"  # Lowercase alphanumeric segments joined by "-"
SLUG_SEPARATOR = "-"  # Separator between segments and before numeric suffixes

# Resolution
DEFAULT_MAX_RESOLUTION_ATTEMPTS = 50  # Oracle queries before giving up on suffix probing
DEFAULT_FALLBACK_BASE = "component"  # Base used when a name yields no slug at all

# Oracle
DEFAULT_ORACLE_TIMEOUT_SECONDS = 5.0  # Timeout for a single uniqueness query
DEFAULT_COMPONENTS_TABLE = "components"  # Table holding published components
DEFAULT_SLUG_COLUMN = "component_slug"  # Column holding the component slug
DEFAULT_NAMESPACE_COLUMN = "user_id"  # Column scoping slugs to their owner

# Interactive Checking
DEFAULT_DEBOUNCE_SECONDS = 0.5  # Quiet period before a typed slug is checked

# Caller Retry Policy
DEFAULT_RETRY_ATTEMPTS = 3  # Attempts for transient oracle failures
DEFAULT_RETRY_MIN_WAIT = 1  # Minimum wait time between retries (seconds)
DEFAULT_RETRY_MAX_WAIT = 5  # Maximum wait time between retries (seconds)

# User-facing Messages
INVALID_SLUG_MESSAGE = "Invalid slug format"
TAKEN_SLUG_MESSAGE = "This slug is already taken"
ORACLE_UNAVAILABLE_MESSAGE = "Could not check slug availability"
CHECKING_SLUG_MESSAGE = "Checking slug availability..."
AVAILABLE_SLUG_MESSAGE = "This slug is available"
OWNED_SLUG_MESSAGE = "You already have a component with this slug"
PLACEHOLDER_NAME = "Button"  # Display name used for the slug field placeholder
