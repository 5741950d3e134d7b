"""Path rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from path_labels.constants import LABEL_VALUE_SEPARATOR, PATH_RULES_VERSION


class MatchMode(str, Enum):
    EXACT = "exact"
    PREFIX = "prefix"


@dataclass(frozen=True)
class PathRule:
    id: str
    path: str
    match: MatchMode
    label_id: str
    value: Optional[str] = None
    enabled: bool = True
    description: Optional[str] = None

    @property
    def label_entry(self) -> str:
        if self.value:
            return f"{self.label_id}{LABEL_VALUE_SEPARATOR}{self.value}"
        return self.label_id

    def with_enabled(self, enabled: bool) -> "PathRule":
        return replace(self, enabled=enabled)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "path": self.path,
            "match": self.match.value,
            "labelId": self.label_id,
        }
        if self.value is not None:
            payload["value"] = self.value
        if not self.enabled:
            payload["enabled"] = False
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class PathRulesConfig:
    version: int = PATH_RULES_VERSION
    rules: tuple[PathRule, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "PathRulesConfig":
        return cls(version=PATH_RULES_VERSION, rules=())

    def find(self, rule_id: str) -> Optional[PathRule]:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None

    def with_rules(self, rules: list[PathRule] | tuple[PathRule, ...]) -> "PathRulesConfig":
        return PathRulesConfig(version=self.version, rules=tuple(rules))

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "rules": [rule.as_dict() for rule in self.rules],
        }


@dataclass(frozen=True)
class PathRuleMatch:
    rule: PathRule
    label_entry: str


def bare_label_id(label_entry: str) -> str:
    return label_entry.split(LABEL_VALUE_SEPARATOR, 1)[0]
