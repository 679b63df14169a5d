"""
git_ignore.detection – Infer template names from a project directory listing.
"""
from .detector import Detector, detect_directory, merge_names
from .rules import DEFAULT_RULES, DetectorRule, Predicate, PredicateKind, rules_from_mapping

__all__ = [
    "DEFAULT_RULES",
    "Detector",
    "DetectorRule",
    "Predicate",
    "PredicateKind",
    "detect_directory",
    "merge_names",
    "rules_from_mapping",
]
