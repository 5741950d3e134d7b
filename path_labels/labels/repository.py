import logging
from pathlib import Path
from typing import Optional

from path_labels.constants import LABELS_CONFIG_FILENAME, LABELS_DIRNAME
from path_labels.labels.models import LabelNode, parse_label_nodes
from path_labels.utils import read_json_safe

logger = logging.getLogger(__name__)


class LabelsConfigRepository:
    """Read-only access to ``labels/config.json``; this package never writes it."""

    def __init__(self, scope_root: Path) -> None:
        self._scope_root = scope_root

    @property
    def config_path(self) -> Path:
        return self._scope_root / LABELS_DIRNAME / LABELS_CONFIG_FILENAME

    def load_labels(self) -> Optional[list[LabelNode]]:
        path = self.config_path
        try:
            payload, error = read_json_safe(path)
        except OSError as exc:
            logger.warning("Cannot read label config %s: %s", path, exc)
            return None
        if error is not None:
            logger.warning("Invalid label config JSON in %s: %s", path, error)
            return None
        if payload is None:
            return None
        if not isinstance(payload, dict) or not isinstance(payload.get("labels"), list):
            logger.warning("Label config %s has no 'labels' array, skipping label validation", path)
            return None
        return parse_label_nodes(payload["labels"])
