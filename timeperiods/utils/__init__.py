"""Shared utilities for the timeperiods package."""

from timeperiods.utils.loaders import (
    load_yaml_file,
)
from timeperiods.utils.resolver import (
    topk_matches,
)

__all__ = [
    # Loading
    "load_yaml_file",
    # Matching
    "topk_matches",
]
