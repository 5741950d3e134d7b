from path_labels.rules.evaluator import apply_path_rule_matches, evaluate_path_rules
from path_labels.rules.matcher import matches_path, normalize_path
from path_labels.rules.models import MatchMode, PathRule, PathRuleMatch, PathRulesConfig
from path_labels.rules.repository import PathRulesRepository, generate_rule_id

__all__ = [
    "MatchMode",
    "PathRule",
    "PathRuleMatch",
    "PathRulesConfig",
    "PathRulesRepository",
    "apply_path_rule_matches",
    "evaluate_path_rules",
    "generate_rule_id",
    "matches_path",
    "normalize_path",
]
