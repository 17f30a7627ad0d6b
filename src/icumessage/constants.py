"""Shared constants for icumessage.

This module provides centralized configuration constants used across the
syntax, runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and formatting
- Cache limits: Memory bounds for caching subsystems
- Branch keys: Reserved plural/select keywords
- Locale defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Branch keys
    "OTHER_BRANCH",
    "EXACT_BRANCH_PREFIX",
    # Locale defaults
    "DEFAULT_LOCALE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: parser (nested branch messages) and formatter (nested plural/select).
# Message trees nested 100 levels deep are malformed or adversarial.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# BRANCH KEYS
# ============================================================================

# Mandatory fallback branch of plural and select components.
OTHER_BRANCH: str = "other"

# Prefix marking an exact-count plural branch in template text: {n, plural, =0 {...}}
EXACT_BRANCH_PREFIX: str = "="

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when an unknown or invalid locale is requested.
DEFAULT_LOCALE: str = "en_US"
