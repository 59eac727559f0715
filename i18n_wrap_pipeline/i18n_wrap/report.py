from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

MODIFIED = "modified"
UNCHANGED = "unchanged"
NO_SCOPE = "no_scope"
NO_NAMESPACE = "no_namespace"
HOOK_FAILED = "hook_failed"
ERROR = "error"

@dataclass
class FileResult:
    path: str
    status: str
    replaced: int = 0
    import_added: bool = False
    hook_added: bool = False
    accessor: str = ""
    written: bool = False
    message: str = ""

@dataclass
class RunReport:
    files: List[FileResult] = field(default_factory=list)

    def add(self, result: FileResult) -> None:
        self.files.append(result)

    @property
    def counts(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for r in self.files:
            out[r.status] = out.get(r.status, 0) + 1
        return out

    @property
    def strings_replaced(self) -> int:
        return sum(r.replaced for r in self.files if r.written)

    @property
    def written(self) -> List[str]:
        return [r.path for r in self.files if r.written]

    @property
    def has_errors(self) -> bool:
        return any(r.status == ERROR for r in self.files)

    def to_dict(self) -> dict:
        return {
            "counts": self.counts,
            "strings_replaced": self.strings_replaced,
            "files": [r.__dict__ for r in self.files],
        }
