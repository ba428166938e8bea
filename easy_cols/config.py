"""
easy-cols shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# Environment helpers
# ---------------------------------------------------------------------------

ENV_PREFIX = "EASYCOLS_"


def load_env():
    """Collect EASYCOLS_* variables from the process environment."""
    return {key: val for key, val in os.environ.items() if key.startswith(ENV_PREFIX)}


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_str(key, default=None):
    """Return a stripped env value, treating empty strings as unset."""
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"

DEFAULT_SEPARATOR = " , "
TABLE_SEPARATOR = " | "
TABLE_RULE_JOINER = "-+-"
PLAIN_JOINER = " "

# ---------------------------------------------------------------------------
# Module-level defaults (loaded from the environment)
# ---------------------------------------------------------------------------

env = load_env()

DEFAULT_INPUT_FORMAT = _env_str("EASYCOLS_INPUT_FORMAT", "auto")
DEFAULT_OUTPUT_FORMAT = _env_str("EASYCOLS_OUTPUT_FORMAT", "same")
# Separators are not stripped: " , " and " | " are meaningful.
DEFAULT_OUTPUT_SEPARATOR = env.get("EASYCOLS_OUTPUT_SEPARATOR") or None
DEFAULT_NO_HEADER = _env_bool("EASYCOLS_NO_HEADER", False)

# ---------------------------------------------------------------------------
# Runtime switches (set by the CLI)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_VERBOSE = False
