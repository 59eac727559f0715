# i18n_wrap/config.py
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import List, Set, Optional

import yaml

@dataclass
class LiteralHints:
    # JSX attributes whose string values are markup/plumbing, never display copy
    skip_attributes: Set[str] = field(default_factory=lambda: {
        "className", "type", "id", "name", "htmlFor", "href", "src",
        "width", "height", "viewBox", "d", "fill", "stroke", "strokeWidth",
        "strokeLinecap", "strokeLinejoin", "key", "role", "target", "rel",
        "method", "action", "autoComplete", "inputMode", "data-testid",
    })
    # Rewrite the static parts of untagged template literals too
    translate_templates: bool = True

@dataclass
class WrapConfig:
    extract_map_path: str = ""
    file_map_path: str = ""
    base_dir: str = "."

    profile: str = "next-intl"
    hook_factory: Optional[str] = None
    hook_module: Optional[str] = None
    accessor_name: str = "t"

    rollback_on_hook_failure: bool = False
    dry_run: bool = False
    log_level: str = "INFO"
    report_path: Optional[str] = None

    # message catalog seeding
    messages_dir: Optional[str] = None
    locales: List[str] = field(default_factory=list)
    source_locale: str = "tr"

    hints: LiteralHints = field(default_factory=LiteralHints)

def load_config(path: str, **overrides) -> WrapConfig:
    """
    Build a WrapConfig from a YAML file. Keys mirror the dataclass fields;
    a nested `hints:` mapping feeds LiteralHints. Keyword overrides that are
    not None win over the file.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top-level YAML value must be a mapping")

    known = {f.name for f in fields(WrapConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"{path}: unknown config keys: {', '.join(sorted(unknown))}")

    hints_data = data.pop("hints", None) or {}
    hint_names = {f.name for f in fields(LiteralHints)}
    bad_hints = set(hints_data) - hint_names
    if bad_hints:
        raise ValueError(f"{path}: unknown hints keys: {', '.join(sorted(bad_hints))}")
    hints = LiteralHints()
    if "skip_attributes" in hints_data:
        hints.skip_attributes = set(hints_data["skip_attributes"] or [])
    if "translate_templates" in hints_data:
        hints.translate_templates = bool(hints_data["translate_templates"])

    data.update({k: v for k, v in overrides.items() if v is not None})
    return WrapConfig(hints=hints, **data)
