"""Shared constants for pcomb.

Centralized configuration constants used by the parser entry point.
Placing constants here avoids circular imports and provides a single
source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["MAX_SOURCE_SIZE"]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Every matched character may produce a cursor and a result node, so input
# size translates directly into memory use.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
