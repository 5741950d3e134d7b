from pathlib import Path


class PathLabelsError(Exception):
    """Base user-facing application error."""


class LabelsFileError(PathLabelsError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RulesWriteError(LabelsFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Failed to save path rules ({detail})")


class RuleNotFoundError(PathLabelsError):
    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"Path rule not found: {rule_id}")
