"""Optional serialization-framework integrations.

Each submodule imports its framework on import; install the matching
extra (e.g. ``fancy-duration[pydantic]``) before importing it.
"""
