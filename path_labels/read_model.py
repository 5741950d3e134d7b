"""Cached view of a scope's path rules for display, with change listeners."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from path_labels.labels.models import LabelNode, find_label
from path_labels.labels.repository import LabelsConfigRepository
from path_labels.rules.models import PathRule, PathRulesConfig
from path_labels.rules.repository import PathRulesRepository

logger = logging.getLogger(__name__)

Listener = Callable[[PathRulesConfig], None]


@dataclass(frozen=True)
class PathRuleRow:
    rule: PathRule
    label: Optional[LabelNode]

    @property
    def label_missing(self) -> bool:
        return self.label is None

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.rule.id,
            "path": self.rule.path,
            "match": self.rule.match.value,
            "label": self.label.display_name if self.label is not None else self.rule.label_id,
            "label_missing": self.label_missing,
            "value": self.rule.value or "",
            "enabled": self.rule.enabled,
            "description": self.rule.description or "",
        }


class PathRulesReadModel:
    def __init__(
        self,
        repository: PathRulesRepository,
        labels_repository: Optional[LabelsConfigRepository] = None,
    ) -> None:
        self._repository = repository
        self._labels_repository = labels_repository
        self._config = PathRulesConfig.empty()
        self._labels: list[LabelNode] = []
        self._listeners: list[Listener] = []
        self.reload()

    @property
    def config(self) -> PathRulesConfig:
        return self._config

    @property
    def rules(self) -> tuple[PathRule, ...]:
        return self._config.rules

    def rows(self) -> list[PathRuleRow]:
        return [PathRuleRow(rule=rule, label=find_label(self._labels, rule.label_id)) for rule in self.rules]

    def reload(self) -> PathRulesConfig:
        self._config = self._repository.load()
        if self._labels_repository is not None:
            self._labels = self._labels_repository.load_labels() or []
        return self._config

    def save(self, config: PathRulesConfig) -> None:
        self._repository.save(config)
        self._config = config
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify_changed(self) -> None:
        self.reload()
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._config)
            except Exception:
                logger.exception("Path rules listener failed")
