from typing import Final


APP_NAME: Final[str] = "path-labels"
HOME_ENV_VAR: Final[str] = "PATH_LABELS_HOME"
WORKSPACES_DIRNAME: Final[str] = "workspaces"

LABELS_DIRNAME: Final[str] = "labels"
PATH_RULES_FILENAME: Final[str] = "path-rules.json"
LABELS_CONFIG_FILENAME: Final[str] = "config.json"

PATH_RULES_VERSION: Final[int] = 1
RULE_ID_PREFIX: Final[str] = "rule"
LABEL_VALUE_SEPARATOR: Final[str] = "::"
