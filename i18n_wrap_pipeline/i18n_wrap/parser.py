# i18n_wrap/parser.py
from __future__ import annotations
from bisect import bisect_left
from functools import lru_cache
from typing import Iterator, List, Optional, Tuple

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser, Tree

class ParseError(Exception):
    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column

@lru_cache(maxsize=None)
def _language(dialect: str) -> Language:
    if dialect == "tsx":
        return Language(tstypescript.language_tsx())
    if dialect == "typescript":
        return Language(tstypescript.language_typescript())
    raise ValueError(f"Unsupported dialect {dialect!r}")

def dialect_for_path(path: str) -> str:
    # plain .ts cannot contain JSX and allows `<T>expr` casts
    return "typescript" if path.lower().endswith((".ts", ".mts", ".cts")) else "tsx"

def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order walk (document order)."""
    stack = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(cur.children))

def same_node(a: Optional[Node], b: Optional[Node]) -> bool:
    if a is None or b is None:
        return False
    return a.type == b.type and a.start_byte == b.start_byte and a.end_byte == b.end_byte

class ParsedSource:
    """A syntax tree plus the text it came from, with tree-sitter byte offsets mapped to str offsets."""

    def __init__(self, text: str, tree: Tree, data: bytes) -> None:
        self.text = text
        self.tree = tree
        self.root = tree.root_node
        self._char_starts: Optional[List[int]] = None
        if len(data) != len(text):
            starts, pos = [0], 0
            for ch in text:
                pos += len(ch.encode("utf-8"))
                starts.append(pos)
            self._char_starts = starts

    def char_offset(self, byte_offset: int) -> int:
        if self._char_starts is None:
            return byte_offset
        return bisect_left(self._char_starts, byte_offset)

    def span(self, node: Node) -> Tuple[int, int]:
        return self.char_offset(node.start_byte), self.char_offset(node.end_byte)

    def start(self, node: Node) -> int:
        return self.char_offset(node.start_byte)

    def end(self, node: Node) -> int:
        return self.char_offset(node.end_byte)

    def node_text(self, node: Node) -> str:
        s, e = self.span(node)
        return self.text[s:e]

class SourceParser:
    def __init__(self, dialect: str = "tsx") -> None:
        self.dialect = dialect
        self._parser = Parser(_language(dialect))

    @classmethod
    def for_path(cls, path: str) -> "SourceParser":
        return cls(dialect_for_path(path))

    def parse(self, text: str) -> ParsedSource:
        data = text.encode("utf-8")
        tree = self._parser.parse(data)
        parsed = ParsedSource(text, tree, data)
        if parsed.root.has_error:
            bad = _first_error(parsed.root)
            if bad is not None:
                row, col = bad.start_point[0] + 1, bad.start_point[1] + 1
                what = f"missing {bad.type}" if bad.is_missing else "unexpected token"
                raise ParseError(f"{what} at {row}:{col}", row, col)
            raise ParseError("syntax error")
        return parsed

def _first_error(root: Node) -> Optional[Node]:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None
