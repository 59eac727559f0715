# i18n_wrap/table_loader.py
from __future__ import annotations
import json
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

import yaml

from .utils import load_text

def load_mapping(path: str) -> Dict[str, Any]:
    """Read a JSON or YAML mapping (by extension); YAML also accepts plain JSON."""
    text = load_text(path)
    if path.lower().endswith((".yaml", ".yml")):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data

@dataclass(frozen=True)
class FileTarget:
    path: str
    namespace: str

class NamespaceStringTable:
    """namespace -> (trimmed literal -> key). Built once, read-only afterwards."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]]) -> None:
        self._tables = MappingProxyType({ns: MappingProxyType(dict(t)) for ns, t in tables.items()})

    @classmethod
    def from_extract_map(cls, extract_map: Mapping[str, Any]) -> "NamespaceStringTable":
        tables: Dict[str, Dict[str, str]] = {}
        for ns, entries in extract_map.items():
            inverted: Dict[str, str] = {}
            if isinstance(entries, dict):
                for key, literal in entries.items():
                    if not isinstance(literal, str):
                        continue
                    trimmed = literal.strip()
                    if trimmed:
                        # later keys win, like a plain object inversion
                        inverted[trimmed] = str(key)
            tables[str(ns)] = inverted
        return cls(tables)

    @classmethod
    def load(cls, path: str) -> "NamespaceStringTable":
        return cls.from_extract_map(load_mapping(path))

    def namespace(self, ns: str) -> Mapping[str, str]:
        return self._tables.get(ns, MappingProxyType({}))

    def lookup(self, ns: str, literal: str) -> str | None:
        return self.namespace(ns).get(literal.strip())

    def __contains__(self, ns: object) -> bool:
        return ns in self._tables

    def namespaces(self) -> List[str]:
        return list(self._tables)

def load_targets(file_map: Mapping[str, Any], base_dir: str = ".") -> List[FileTarget]:
    """File map entries in input order, relative paths resolved against base_dir."""
    out: List[FileTarget] = []
    for path, ns in file_map.items():
        if not isinstance(ns, str) or not ns:
            continue
        full = path if os.path.isabs(path) else os.path.join(base_dir or ".", path)
        out.append(FileTarget(os.path.normpath(full), ns))
    return out
