# i18n_wrap/scope.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from tree_sitter import Node

from .parser import ParsedSource, iter_nodes

FUNCTION_DECLARATION_TYPES = {"function_declaration", "generator_function_declaration"}
# "function" is the pre-0.21 grammar name of function_expression
FUNCTION_VALUE_TYPES = {"function_expression", "function", "generator_function", "arrow_function"}
FUNCTION_TYPES = FUNCTION_DECLARATION_TYPES | FUNCTION_VALUE_TYPES | {"method_definition"}
VARIABLE_DECLARATION_TYPES = {"lexical_declaration", "variable_declaration"}

# how many `const A = B` hops an exported identifier may take before giving up
MAX_ALIAS_DEPTH = 4

@dataclass(frozen=True)
class ScopeBounds:
    start: int
    end: int
    via: str  # "hook" | "default-export"

    def contains(self, start: int, end: int) -> bool:
        return start >= self.start and end <= self.end

@dataclass(frozen=True)
class HookBinding:
    exists: bool
    local_name: str

# ---------- helpers ----------

def _unwrap_parens(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == "parenthesized_expression":
        inner = [c for c in node.named_children if c.type != "comment"]
        node = inner[0] if inner else None
    return node

def enclosing_function(node: Node) -> Optional[Node]:
    cur = node.parent
    while cur is not None:
        if cur.type in FUNCTION_TYPES:
            return cur
        cur = cur.parent
    return None

def _binding_name(src: ParsedSource, pattern: Optional[Node], destructure_property: Optional[str]) -> Optional[str]:
    if pattern is None:
        return None
    if pattern.type == "identifier":
        return src.node_text(pattern)
    if pattern.type != "object_pattern" or not destructure_property:
        return None
    for child in pattern.named_children:
        if child.type == "shorthand_property_identifier_pattern" and src.node_text(child) == destructure_property:
            return destructure_property
        if child.type == "pair_pattern":
            key = child.child_by_field_name("key")
            value = child.child_by_field_name("value")
            if key is not None and src.node_text(key) == destructure_property and value is not None and value.type == "identifier":
                return src.node_text(value)
    return None

def _top_level_statements(src: ParsedSource):
    for stmt in src.root.named_children:
        if stmt.type == "export_statement":
            decl = stmt.child_by_field_name("declaration")
            if decl is not None:
                yield decl
            continue
        yield stmt

def _is_default_export(stmt: Node) -> bool:
    return stmt.type == "export_statement" and any(c.type == "default" for c in stmt.children)

# ---------- hook binding ----------

def find_hook_binding(src: ParsedSource, hook_factory: str, destructure_property: Optional[str] = None) -> Optional[Tuple[str, Node]]:
    """
    First `<binding> = <hook_factory>(...)` in document order that sits inside a function.
    Returns (local accessor name, enclosing function node).
    """
    for node in iter_nodes(src.root):
        if node.type != "call_expression":
            continue
        fn = node.child_by_field_name("function")
        if fn is None or fn.type != "identifier" or src.node_text(fn) != hook_factory:
            continue
        holder = node.parent
        if holder is not None and holder.type == "await_expression":
            holder = holder.parent
        if holder is None or holder.type != "variable_declarator":
            continue
        name = _binding_name(src, holder.child_by_field_name("name"), destructure_property)
        if name is None:
            continue
        func = enclosing_function(node)
        if func is None:
            continue
        return name, func
    return None

# ---------- default export ----------

def resolve_to_function(src: ParsedSource, name: str, depth: int = 0) -> Optional[Node]:
    """Resolve a top-level binding to the function node it names, following plain aliases."""
    for stmt in _top_level_statements(src):
        if stmt.type in FUNCTION_DECLARATION_TYPES:
            ident = stmt.child_by_field_name("name")
            if ident is not None and src.node_text(ident) == name:
                return stmt
        elif stmt.type in VARIABLE_DECLARATION_TYPES:
            for decl in stmt.named_children:
                if decl.type != "variable_declarator":
                    continue
                ident = decl.child_by_field_name("name")
                if ident is None or ident.type != "identifier" or src.node_text(ident) != name:
                    continue
                value = _unwrap_parens(decl.child_by_field_name("value"))
                if value is None:
                    return None
                if value.type in FUNCTION_VALUE_TYPES:
                    return value
                if value.type == "identifier" and depth < MAX_ALIAS_DEPTH:
                    return resolve_to_function(src, src.node_text(value), depth + 1)
                return None
    return None

def resolve_to_function_span(src: ParsedSource, name: str) -> Optional[Tuple[int, int]]:
    func = resolve_to_function(src, name)
    return src.span(func) if func is not None else None

def default_export_function(src: ParsedSource) -> Optional[Node]:
    for stmt in src.root.named_children:
        if _is_default_export(stmt):
            target = stmt.child_by_field_name("declaration") or stmt.child_by_field_name("value")
            target = _unwrap_parens(target)
            if target is None:
                return None
            if target.type in FUNCTION_DECLARATION_TYPES or target.type in FUNCTION_VALUE_TYPES:
                return target
            if target.type == "identifier":
                return resolve_to_function(src, src.node_text(target))
            return None
        if stmt.type == "export_statement" and stmt.child_by_field_name("source") is None:
            # export { Page as default };
            for clause in stmt.named_children:
                if clause.type != "export_clause":
                    continue
                for spec in clause.named_children:
                    alias = spec.child_by_field_name("alias")
                    name = spec.child_by_field_name("name")
                    if alias is not None and name is not None and src.node_text(alias) == "default":
                        return resolve_to_function(src, src.node_text(name))
    return None

def hook_insertion_point(src: ParsedSource) -> Optional[Tuple[int, bool]]:
    """
    Where a statement can open the default-export function body: (offset of the
    first statement, True), or (just past `{`, False) when the body is empty.
    """
    func = default_export_function(src)
    if func is None:
        return None
    body = func.child_by_field_name("body")
    if body is None or body.type != "statement_block":
        return None
    statements = [c for c in body.named_children if c.type != "comment"]
    if statements:
        return src.start(statements[0]), True
    return src.start(body) + 1, False

# ---------- locator ----------

class ScopeLocator:
    def __init__(self, hook_factory: str, accessor_name: str = "t", destructure_property: Optional[str] = None) -> None:
        self.hook_factory = hook_factory
        self.accessor_name = accessor_name
        self.destructure_property = destructure_property

    def locate(self, src: ParsedSource) -> Tuple[Optional[ScopeBounds], HookBinding]:
        found = find_hook_binding(src, self.hook_factory, self.destructure_property)
        if found is not None:
            name, func = found
            start, end = src.span(func)
            return ScopeBounds(start, end, "hook"), HookBinding(True, name)

        func = default_export_function(src)
        binding = HookBinding(False, self.accessor_name)
        if func is None:
            return None, binding
        start, end = src.span(func)
        return ScopeBounds(start, end, "default-export"), binding
