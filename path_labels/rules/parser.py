"""Decode and serialize the persisted path rules document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

from jsonschema import Draft202012Validator

from path_labels.constants import PATH_RULES_VERSION
from path_labels.rules.models import MatchMode, PathRule, PathRulesConfig

_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


@dataclass(frozen=True)
class DecodedRule:
    rule: PathRule


@dataclass(frozen=True)
class RejectedRule:
    raw: Any
    reason: str


RuleDecodeResult = Union[DecodedRule, RejectedRule]


@dataclass(frozen=True)
class DecodedDocument:
    config: PathRulesConfig
    rejected: list[RejectedRule] = field(default_factory=list)


@dataclass(frozen=True)
class RejectedDocument:
    reason: str


DocumentDecodeResult = Union[DecodedDocument, RejectedDocument]


@lru_cache(maxsize=1)
def _rule_validator() -> Draft202012Validator:
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def decode_rule(raw: Any) -> RuleDecodeResult:
    error = next(iter(_rule_validator().iter_errors(raw)), None)
    if error is not None:
        return RejectedRule(raw=raw, reason=format_schema_error(error))

    value = raw.get("value")
    description = raw.get("description")
    rule = PathRule(
        id=raw["id"],
        path=raw["path"],
        match=MatchMode(raw["match"]),
        label_id=raw["labelId"],
        value=value if isinstance(value, str) else None,
        enabled=raw.get("enabled") is not False,
        description=description if isinstance(description, str) else None,
    )
    return DecodedRule(rule=rule)


def decode_rules_document(payload: Any) -> DocumentDecodeResult:
    if not isinstance(payload, dict):
        return RejectedDocument(reason="top-level value must be a JSON object")

    raw_rules = payload.get("rules")
    if not isinstance(raw_rules, list):
        return DecodedDocument(config=PathRulesConfig.empty())

    rules: list[PathRule] = []
    rejected: list[RejectedRule] = []
    seen_ids: set[str] = set()
    for raw in raw_rules:
        result = decode_rule(raw)
        if isinstance(result, RejectedRule):
            rejected.append(result)
            continue
        if result.rule.id in seen_ids:
            rejected.append(RejectedRule(raw=raw, reason=f"duplicate rule id '{result.rule.id}'"))
            continue
        seen_ids.add(result.rule.id)
        rules.append(result.rule)

    config = PathRulesConfig(version=PATH_RULES_VERSION, rules=tuple(rules))
    return DecodedDocument(config=config, rejected=rejected)


def serialize_rules_config(config: PathRulesConfig) -> dict[str, Any]:
    return config.as_dict()
