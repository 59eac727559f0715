# i18n_wrap/collector.py
from __future__ import annotations
import html
from typing import Iterator, List, Mapping, Optional, Tuple

from tree_sitter import Node

from .applier import Edit
from .config import LiteralHints
from .parser import ParsedSource, iter_nodes, same_node
from .scope import ScopeBounds
from .utils import js_single_quote, split_outer_whitespace, unescape_js_string

IMPORT_CONTEXT_TYPES = {
    "import_statement", "import_clause", "named_imports", "import_specifier",
    "namespace_import", "import_require_clause", "export_clause", "export_specifier",
}
# parent type -> field that holds a member key
MEMBER_KEY_FIELDS = {
    "pair": "key",
    "pair_pattern": "key",
    "method_definition": "name",
    "public_field_definition": "name",
    "property_signature": "name",
    "method_signature": "name",
    "abstract_method_signature": "name",
    "enum_assignment": "name",
}
TYPE_CONTEXT_TYPES = {
    "literal_type", "template_literal_type", "type_annotation", "type_arguments",
    "type_parameters", "type_alias_declaration", "interface_declaration",
    "ambient_declaration", "index_signature", "type_predicate", "asserts",
}
# children of jsx_element that are part of an inline text run
JSX_TEXT_TYPES = {"jsx_text", "html_character_reference", "comment"}


class LiteralCollector:
    """
    Finds literal text inside one scope whose trimmed value is a known string of
    the namespace, and records the edit that swaps it for an accessor call.
    Read-only: the source text is never touched here.
    """

    def __init__(
        self,
        strings: Mapping[str, str],
        accessor: str,
        hook_factory: str,
        hints: LiteralHints | None = None,
    ) -> None:
        self.strings = strings
        self.accessor = accessor
        self.hook_factory = hook_factory
        self.hints = hints or LiteralHints()

    def _call(self, key: str) -> str:
        return f"{self.accessor}({js_single_quote(key)})"

    # ---------- skip rules ----------

    def _in_type_context(self, node: Node) -> bool:
        cur = node.parent
        while cur is not None:
            if cur.type in TYPE_CONTEXT_TYPES:
                return True
            cur = cur.parent
        return False

    def _is_translation_call_arg(self, src: ParsedSource, node: Node) -> bool:
        args = node.parent
        if args is None or args.type != "arguments":
            return False
        call = args.parent
        if call is None or call.type != "call_expression":
            return False
        fn = call.child_by_field_name("function")
        if fn is not None and fn.type == "member_expression":
            # t.rich('key'), t.raw('key')
            fn = fn.child_by_field_name("object")
        return fn is not None and fn.type == "identifier" and src.node_text(fn) in (self.accessor, self.hook_factory)

    def skip_reason(self, src: ParsedSource, node: Node) -> Optional[str]:
        parent = node.parent
        if parent is None:
            return "root"
        if parent.type in IMPORT_CONTEXT_TYPES:
            return "import"
        if parent.type == "export_statement" and same_node(parent.child_by_field_name("source"), node):
            return "import"
        field = MEMBER_KEY_FIELDS.get(parent.type)
        if field and same_node(parent.child_by_field_name(field), node):
            return "member-key"
        if parent.type == "computed_property_name":
            return "member-key"
        if self._in_type_context(node):
            return "type"
        if parent.type == "expression_statement":
            return "directive"
        if self._is_translation_call_arg(src, node):
            return "translation-call"
        if parent.type == "jsx_attribute":
            name = parent.named_children[0] if parent.named_children else None
            if name is not None and src.node_text(name) in self.hints.skip_attributes:
                return "attribute"
        if node.type == "template_string" and parent.type == "call_expression":
            return "tagged-template"
        return None

    # ---------- node kinds ----------

    def _jsx_text_runs(self, src: ParsedSource, element: Node) -> Iterator[Tuple[int, int]]:
        # a run is all source between two structural children, whitespace included
        run_start: Optional[int] = None
        has_text = False
        for child in element.named_children:
            if child.type == "jsx_opening_element":
                run_start, has_text = src.end(child), False
                continue
            if child.type in JSX_TEXT_TYPES:
                has_text = True
                continue
            if run_start is not None and has_text:
                yield run_start, src.start(child)
            run_start, has_text = src.end(child), False

    def _template_segments(self, src: ParsedSource, node: Node) -> Iterator[Tuple[int, int]]:
        start, end = src.span(node)
        cursor = start + 1  # past the opening backtick
        for child in node.named_children:
            if child.type == "template_substitution":
                yield cursor, src.start(child)
                cursor = src.end(child)
        yield cursor, end - 1

    def _text_edit(self, src: ParsedSource, start: int, end: int, wrap: str, jsx: bool = False) -> Optional[Edit]:
        if start >= end:
            return None
        lead, core, trail = split_outer_whitespace(src.text[start:end])
        if not core:
            return None
        # JSX text holds HTML entities (&nbsp;, &amp;); match on the decoded value
        value = html.unescape(core).strip() if jsx else core
        key = self.strings.get(value)
        if key is None:
            return None
        return Edit(start, end, f"{lead}{wrap % self._call(key)}{trail}")

    def _string_edit(self, src: ParsedSource, node: Node) -> Optional[Edit]:
        start, end = src.span(node)
        body = src.text[start + 1:end - 1]
        in_attribute = node.parent is not None and node.parent.type == "jsx_attribute"
        # JSX attribute strings are HTML-like: backslashes are literal
        value = body if in_attribute else unescape_js_string(body)
        trimmed = value.strip()
        if not trimmed:
            return None
        key = self.strings.get(trimmed)
        if key is None:
            return None
        call = self._call(key)
        return Edit(start, end, "{" + call + "}" if in_attribute else call)

    # ---------- walk ----------

    def collect(self, src: ParsedSource, scope: ScopeBounds) -> List[Edit]:
        edits: List[Edit] = []
        for node in iter_nodes(src.root):
            start, end = src.span(node)
            if end <= scope.start or start >= scope.end:
                continue
            if node.type == "jsx_element":
                for s, e in self._jsx_text_runs(src, node):
                    if scope.contains(s, e):
                        edit = self._text_edit(src, s, e, "{%s}", jsx=True)
                        if edit is not None:
                            edits.append(edit)
            elif node.type == "string":
                if not scope.contains(start, end) or self.skip_reason(src, node):
                    continue
                edit = self._string_edit(src, node)
                if edit is not None:
                    edits.append(edit)
            elif node.type == "template_string" and self.hints.translate_templates:
                if not scope.contains(start, end) or self.skip_reason(src, node):
                    continue
                for s, e in self._template_segments(src, node):
                    edit = self._text_edit(src, s, e, "${%s}")
                    if edit is not None:
                        edits.append(edit)
        return edits
