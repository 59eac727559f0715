# i18n_wrap/injectors.py
from __future__ import annotations
import logging
from typing import Iterable, Optional

from .applier import Edit, insert_text, map_offset
from .logger import get_logger
from .parser import ParsedSource, ParseError, SourceParser, iter_nodes
from .profiles import FrameworkProfile
from .scope import hook_insertion_point
from .utils import detect_newline, line_indent_before


class ImportInjector:
    """Adds `import { <hook> } from '<module>';` once, after the last top-level import."""

    def __init__(self, profile: FrameworkProfile) -> None:
        self.profile = profile

    def has_import(self, src: ParsedSource) -> bool:
        # any module counts: a second binding of the same name would not compile
        for stmt in src.root.named_children:
            if stmt.type != "import_statement":
                continue
            for node in iter_nodes(stmt):
                if node.type != "import_specifier":
                    continue
                name = node.child_by_field_name("name")
                if name is not None and src.node_text(name) == self.profile.hook_factory:
                    return True
        return False

    def _last_import_end(self, src: ParsedSource) -> Optional[int]:
        end = None
        for stmt in src.root.named_children:
            if stmt.type == "import_statement":
                end = src.end(stmt)
        return end

    def _directive_prologue_end(self, src: ParsedSource) -> Optional[int]:
        # 'use client' must stay the first statement of the module
        end = None
        for stmt in src.root.named_children:
            if stmt.type == "comment":
                continue
            strings = [c for c in stmt.named_children if c.type == "string"]
            if stmt.type == "expression_statement" and len(strings) == 1 and len(stmt.named_children) == 1:
                end = src.end(stmt)
                continue
            break
        return end

    def inject(self, original: ParsedSource, text: str, edits: Iterable[Edit] = ()) -> tuple[str, bool]:
        """
        `original` is the parse of the text before `edits` were applied; its offsets
        are carried through the edits into `text`.
        """
        if self.has_import(original):
            return text, False
        newline = detect_newline(text)
        statement = self.profile.import_statement()
        anchor = self._last_import_end(original)
        if anchor is None:
            anchor = self._directive_prologue_end(original)
        if anchor is None:
            return statement + newline + text, True
        return insert_text(text, map_offset(edits, anchor), newline + statement), True


class HookInjector:
    """Opens the default-export component body with the hook statement."""

    def __init__(self, profile: FrameworkProfile, parser: SourceParser, logger: logging.Logger | None = None) -> None:
        self.profile = profile
        self.parser = parser
        self.logger = logger or get_logger()

    def inject(self, text: str, accessor: str, namespace: str) -> Optional[str]:
        """Returns the new text, or None when no insertion point can be found."""
        try:
            src = self.parser.parse(text)
        except ParseError as e:
            self.logger.debug(f"Re-parse after edits failed: {e}")
            return None
        point = hook_insertion_point(src)
        if point is None:
            return None
        offset, has_statements = point
        statement = self.profile.hook_statement(accessor, namespace)
        if not has_statements:
            return insert_text(text, offset, f" {statement} ")
        indent = line_indent_before(text, offset)
        if indent is None:
            return insert_text(text, offset, f"{statement} ")
        return insert_text(text, offset, f"{statement}{detect_newline(text)}{indent}")
