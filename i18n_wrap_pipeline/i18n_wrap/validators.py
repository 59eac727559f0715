from __future__ import annotations
from typing import Any, Dict, List, Mapping
from dataclasses import dataclass

@dataclass
class ValidationIssue:
    kind: str
    detail: str
    namespace: str
    key: str = ""

def check_literal_collisions(extract_map: Mapping[str, Any]) -> List[ValidationIssue]:
    # two keys sharing a trimmed literal: only the last one can ever be emitted
    issues: List[ValidationIssue] = []
    for ns, entries in extract_map.items():
        if not isinstance(entries, dict):
            continue
        seen: Dict[str, str] = {}
        for key, literal in entries.items():
            if not isinstance(literal, str) or not literal.strip():
                continue
            trimmed = literal.strip()
            if trimmed in seen:
                issues.append(ValidationIssue(
                    "literal_collision",
                    f"'{trimmed}' is mapped by both '{seen[trimmed]}' and '{key}'; '{key}' wins",
                    str(ns), str(key)))
            seen[trimmed] = str(key)
    return issues

def check_empty_literals(extract_map: Mapping[str, Any]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for ns, entries in extract_map.items():
        if not isinstance(entries, dict):
            issues.append(ValidationIssue("bad_namespace", "Namespace value is not a key/literal mapping", str(ns)))
            continue
        for key, literal in entries.items():
            if not isinstance(literal, str):
                issues.append(ValidationIssue("non_string", f"Literal for '{key}' is {type(literal).__name__}, ignored", str(ns), str(key)))
            elif not literal.strip():
                issues.append(ValidationIssue("empty_literal", f"Literal for '{key}' is blank, ignored", str(ns), str(key)))
    return issues

def check_unknown_namespaces(file_map: Mapping[str, Any], extract_map: Mapping[str, Any]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for path, ns in file_map.items():
        if ns not in extract_map:
            issues.append(ValidationIssue("unknown_namespace", f"{path} is assigned to a namespace with no strings", str(ns)))
    return issues

def validate_inputs(extract_map: Mapping[str, Any], file_map: Mapping[str, Any]) -> List[ValidationIssue]:
    return (
        check_empty_literals(extract_map)
        + check_literal_collisions(extract_map)
        + check_unknown_namespaces(file_map, extract_map)
    )
