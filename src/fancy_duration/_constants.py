"""Resource limits and fixed literals for fancy duration text."""

DEFAULT_MAX_INPUT_LENGTH = 1024
"""Maximum accepted duration text length (CWE-400 prevention)."""

MAX_EXPONENT = 30
"""Largest absolute scientific-notation exponent on a seconds count (CWE-400 prevention)."""

NANOS_PER_SECOND = 1_000_000_000

ZERO_LITERAL = "0s"
"""Rendering of a zero-length duration."""
