"""Repository for the per-scope path rules document."""

from __future__ import annotations

import logging
import secrets
import string
import time
from pathlib import Path
from typing import Optional

from path_labels.constants import (
    LABELS_DIRNAME,
    PATH_RULES_FILENAME,
    RULE_ID_PREFIX,
)
from path_labels.errors import RuleNotFoundError, RulesWriteError
from path_labels.rules.models import PathRule, PathRulesConfig
from path_labels.rules.parser import (
    RejectedDocument,
    decode_rules_document,
    serialize_rules_config,
)
from path_labels.utils import read_json_safe, write_json

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_rule_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))
    return f"{RULE_ID_PREFIX}-{int(time.time() * 1000)}-{suffix}"


class PathRulesRepository:
    """Loads and saves ``labels/path-rules.json`` under one scope root.

    Loading never raises: a missing document is an empty rule set, a corrupt
    one is logged and treated as empty, and invalid entries are dropped.
    Saving replaces the whole document and raises ``RulesWriteError`` on I/O
    failure. Writers for the same scope must be serialized by the caller.
    """

    def __init__(self, scope_root: Path) -> None:
        self._scope_root = scope_root

    @property
    def scope_root(self) -> Path:
        return self._scope_root

    @property
    def rules_path(self) -> Path:
        return self._scope_root / LABELS_DIRNAME / PATH_RULES_FILENAME

    def load(self) -> PathRulesConfig:
        path = self.rules_path
        try:
            payload, error = read_json_safe(path)
        except OSError as exc:
            logger.warning("Cannot read path rules %s, using empty rule set: %s", path, exc)
            return PathRulesConfig.empty()
        if error is not None:
            logger.warning("Invalid path rules JSON in %s, using empty rule set: %s", path, error)
            return PathRulesConfig.empty()
        if payload is None:
            return PathRulesConfig.empty()

        result = decode_rules_document(payload)
        if isinstance(result, RejectedDocument):
            logger.warning("Invalid path rules structure in %s, using empty rule set: %s", path, result.reason)
            return PathRulesConfig.empty()

        for rejected in result.rejected:
            logger.warning("Skipping invalid path rule in %s (%s): %r", path, rejected.reason, rejected.raw)
        return result.config

    def save(self, config: PathRulesConfig) -> None:
        try:
            write_json(self.rules_path, serialize_rules_config(config))
        except OSError as exc:
            raise RulesWriteError(self.rules_path, str(exc)) from exc

    def get_rule(self, rule_id: str) -> Optional[PathRule]:
        return self.load().find(rule_id)

    def add_rule(self, rule: PathRule) -> PathRulesConfig:
        config = self.load()
        if config.find(rule.id) is not None:
            raise ValueError(f"Path rule already exists: {rule.id}")
        updated = config.with_rules([*config.rules, rule])
        self.save(updated)
        return updated

    def remove_rule(self, rule_id: str) -> bool:
        config = self.load()
        remaining = [rule for rule in config.rules if rule.id != rule_id]
        if len(remaining) == len(config.rules):
            return False
        self.save(config.with_rules(remaining))
        return True

    def set_enabled(self, rule_id: str, enabled: bool) -> PathRule:
        config = self.load()
        target = config.find(rule_id)
        if target is None:
            raise RuleNotFoundError(rule_id)
        updated_rule = target.with_enabled(enabled)
        self.save(
            config.with_rules(
                [updated_rule if rule.id == rule_id else rule for rule in config.rules]
            )
        )
        return updated_rule
