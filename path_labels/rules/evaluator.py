"""Evaluate path rules for a working directory and merge the results into session labels.

Both functions are pure: no I/O, no shared state. Evaluation order is
longest rule path first (stable for equal lengths), so a more specific rule
claims a label entry before a broader one.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from path_labels.labels.models import LabelNode, find_label
from path_labels.rules.matcher import matches_path
from path_labels.rules.models import PathRuleMatch, PathRulesConfig, bare_label_id

logger = logging.getLogger(__name__)


def evaluate_path_rules(
    working_directory: Optional[str],
    config: PathRulesConfig,
    labels: Optional[Sequence[LabelNode]] = None,
    *,
    case_insensitive: Optional[bool] = None,
) -> list[PathRuleMatch]:
    if not working_directory:
        return []

    enabled_rules = [rule for rule in config.rules if rule.enabled]
    ordered_rules = sorted(enabled_rules, key=lambda rule: len(rule.path), reverse=True)

    matches: list[PathRuleMatch] = []
    seen_entries: set[str] = set()
    for rule in ordered_rules:
        if not matches_path(rule.path, working_directory, rule.match, case_insensitive=case_insensitive):
            continue

        if labels is not None and find_label(labels, rule.label_id) is None:
            logger.warning(
                "Path rule %r references non-existent label %r, skipping",
                rule.id,
                rule.label_id,
            )
            continue

        label_entry = rule.label_entry
        if label_entry in seen_entries:
            continue
        seen_entries.add(label_entry)
        matches.append(PathRuleMatch(rule=rule, label_entry=label_entry))

    return matches


def apply_path_rule_matches(
    current_labels: Optional[list[str]],
    matches: Sequence[PathRuleMatch],
) -> Optional[list[str]]:
    """Append matched entries to ``current_labels`` without touching existing ones.

    Returns ``current_labels`` itself when nothing is added. An entry is
    skipped when it is already present or when any existing label shares its
    bare id, so a value chosen by the user is never shadowed by a rule.
    Only pre-existing labels are checked for bare-id conflicts, not entries
    staged earlier in the same call.
    """
    if not matches:
        return current_labels

    existing = list(current_labels or [])
    existing_entries = set(existing)
    existing_bare_ids = {bare_label_id(entry) for entry in existing}

    staged: list[str] = []
    for match in matches:
        if match.label_entry in existing_entries:
            continue
        if bare_label_id(match.label_entry) in existing_bare_ids:
            continue
        staged.append(match.label_entry)

    if not staged:
        return current_labels
    return existing + staged
