"""Exclusion rules deciding which entries are pruned from a walk."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .hidden_rules import HiddenExclusionRules
from .library_rules import SKIP_SET, LibraryExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "HiddenExclusionRules",
    "LibraryExclusionRules",
    "SKIP_SET",
]
