# i18n_wrap/profiles/__init__.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List, Optional
import json
import os

from ..utils import js_single_quote

@dataclass
class FrameworkProfile:
    id: str
    # Hook that returns the accessor, and the module it is imported from
    hook_factory: str
    hook_module: str
    # None: `const t = hook(ns)`; otherwise the property destructured from the hook result
    destructure_property: Optional[str] = None
    # package.json dependency names that select this profile
    packages: tuple = ()

    def hook_statement(self, accessor: str, namespace: str) -> str:
        call = f"{self.hook_factory}({js_single_quote(namespace)})"
        if self.destructure_property is None:
            return f"const {accessor} = {call};"
        if accessor == self.destructure_property:
            return f"const {{ {accessor} }} = {call};"
        return f"const {{ {self.destructure_property}: {accessor} }} = {call};"

    def import_statement(self) -> str:
        return f"import {{ {self.hook_factory} }} from {js_single_quote(self.hook_module)};"

# Import concrete profiles
from .next_intl import next_intl_profile
from .react_i18next import react_i18next_profile

ALL_PROFILES: List[FrameworkProfile] = [
    next_intl_profile(),
    react_i18next_profile(),
]

DEFAULT_PROFILE_ID = "next-intl"

def get_profile(profile_id: str) -> FrameworkProfile:
    for p in ALL_PROFILES:
        if p.id == profile_id:
            return p
    raise ValueError(f"Unknown profile '{profile_id}' (choose from: {', '.join(p.id for p in ALL_PROFILES)})")

def pick_profile(package_json_path: str | None) -> FrameworkProfile:
    # Choose by the i18n library the project depends on; next-intl when nothing matches
    deps: Dict[str, str] = {}
    if package_json_path and os.path.exists(package_json_path):
        with open(package_json_path, "r", encoding="utf-8") as f:
            pkg = json.load(f)
        for section in ("dependencies", "devDependencies", "peerDependencies"):
            deps.update(pkg.get(section) or {})
    for p in ALL_PROFILES:
        if any(name in deps for name in p.packages):
            return p
    return get_profile(DEFAULT_PROFILE_ID)

def resolve_profile(cfg) -> FrameworkProfile:
    """Profile named by cfg.profile ("auto" reads <base_dir>/package.json), with hook overrides applied."""
    if cfg.profile == "auto":
        profile = pick_profile(os.path.join(cfg.base_dir or ".", "package.json"))
    else:
        profile = get_profile(cfg.profile)
    if cfg.hook_factory:
        profile = replace(profile, hook_factory=cfg.hook_factory)
    if cfg.hook_module:
        profile = replace(profile, hook_module=cfg.hook_module)
    return profile
