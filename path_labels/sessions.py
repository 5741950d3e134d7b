"""Hooks for the session lifecycle: creation and working-directory changes.

The caller decides when to invoke these and persists the session afterwards.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence

from path_labels.labels.models import LabelNode
from path_labels.labels.repository import LabelsConfigRepository
from path_labels.rules.evaluator import apply_path_rule_matches, evaluate_path_rules
from path_labels.rules.models import PathRulesConfig
from path_labels.rules.repository import PathRulesRepository

logger = logging.getLogger(__name__)


class LabeledSession(Protocol):
    working_directory: Optional[str]
    labels: Optional[list[str]]


def auto_label(
    labels: Optional[list[str]],
    working_directory: Optional[str],
    config: PathRulesConfig,
    label_tree: Optional[Sequence[LabelNode]] = None,
) -> Optional[list[str]]:
    matches = evaluate_path_rules(working_directory, config, label_tree)
    return apply_path_rule_matches(labels, matches)


class PathLabelService:
    def __init__(
        self,
        rules: PathRulesRepository,
        labels: Optional[LabelsConfigRepository] = None,
    ) -> None:
        self._rules = rules
        self._labels = labels

    def labels_for(
        self, working_directory: Optional[str], current: Optional[list[str]]
    ) -> Optional[list[str]]:
        if not working_directory:
            return current
        config = self._rules.load()
        label_tree = self._labels.load_labels() if self._labels is not None else None
        return auto_label(current, working_directory, config, label_tree)

    def _apply(self, session: LabeledSession) -> bool:
        updated = self.labels_for(session.working_directory, session.labels)
        if updated is session.labels:
            return False
        logger.debug(
            "Path rules added labels %s for %s",
            updated[len(session.labels or []):] if updated else [],
            session.working_directory,
        )
        session.labels = updated
        return True

    def on_session_created(self, session: LabeledSession) -> bool:
        return self._apply(session)

    def on_working_directory_changed(self, session: LabeledSession, working_directory: str) -> bool:
        session.working_directory = working_directory
        return self._apply(session)
