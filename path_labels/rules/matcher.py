"""Cross-platform working-directory matching for path rules."""

from __future__ import annotations

import os
import sys
from typing import Optional

from path_labels.rules.models import MatchMode

CASE_INSENSITIVE_PATHS = sys.platform == "win32"


def normalize_path(path: str, case_insensitive: Optional[bool] = None) -> str:
    """Absolute, separator-collapsed form of ``path`` with ``.``/``..`` folded.

    No symlinks are resolved. Relative input is resolved against the current
    working directory.
    """
    if case_insensitive is None:
        case_insensitive = CASE_INSENSITIVE_PATHS
    normalized = os.path.normpath(os.path.abspath(path))
    return normalized.lower() if case_insensitive else normalized


def _is_within(root: str, candidate: str) -> bool:
    try:
        rel = os.path.relpath(candidate, root)
    except ValueError:
        # different drives on Windows
        return False
    if rel == os.curdir:
        return True
    if rel == os.pardir or rel.startswith(os.pardir + os.sep):
        return False
    return not os.path.isabs(rel)


def matches_path(
    rule_path: str,
    working_directory: str,
    mode: MatchMode,
    *,
    case_insensitive: Optional[bool] = None,
) -> bool:
    normalized_rule = normalize_path(rule_path, case_insensitive)
    normalized_dir = normalize_path(working_directory, case_insensitive)

    if mode == MatchMode.EXACT:
        return normalized_rule == normalized_dir
    return normalized_rule == normalized_dir or _is_within(normalized_rule, normalized_dir)
