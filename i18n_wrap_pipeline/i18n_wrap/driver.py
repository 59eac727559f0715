# i18n_wrap/driver.py
from __future__ import annotations
import logging
import os
from typing import Dict, Iterable, Optional, Tuple

from .applier import EditConflict, apply_edits, dedupe_edits
from .collector import LiteralCollector
from .config import WrapConfig
from .injectors import HookInjector, ImportInjector
from .logger import get_logger
from .parser import ParseError, SourceParser, dialect_for_path
from .profiles import FrameworkProfile, resolve_profile
from .report import (
    ERROR, HOOK_FAILED, MODIFIED, NO_NAMESPACE, NO_SCOPE, UNCHANGED,
    FileResult, RunReport,
)
from .scope import ScopeLocator
from .table_loader import FileTarget, NamespaceStringTable
from .utils import load_text, save_text_atomic


class WrapDriver:
    """
    Runs the per-file pipeline (parse, locate scope, collect, apply, add import,
    add hook, write) over a list of targets. A file is written once, at the end,
    or not at all.
    """

    def __init__(
        self,
        table: NamespaceStringTable,
        cfg: WrapConfig | None = None,
        profile: FrameworkProfile | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.table = table
        self.cfg = cfg or WrapConfig()
        self.profile = profile or resolve_profile(self.cfg)
        self.logger = logger or get_logger()
        self.locator = ScopeLocator(
            self.profile.hook_factory,
            accessor_name=self.cfg.accessor_name,
            destructure_property=self.profile.destructure_property,
        )
        self.import_injector = ImportInjector(self.profile)
        self._parsers: Dict[str, SourceParser] = {}

    def _parser_for(self, path: str) -> SourceParser:
        dialect = dialect_for_path(path)
        if dialect not in self._parsers:
            self._parsers[dialect] = SourceParser(dialect)
        return self._parsers[dialect]

    def transform(self, path: str, text: str, namespace: str) -> Tuple[FileResult, Optional[str]]:
        """Compute the rewrite of one file in memory: (result, new text or None when nothing is to be written)."""
        strings = self.table.namespace(namespace)
        if not strings:
            return FileResult(path, NO_NAMESPACE, message=f"namespace '{namespace}' has no strings"), None

        parser = self._parser_for(path)
        src = parser.parse(text)

        scope, binding = self.locator.locate(src)
        if scope is None:
            return FileResult(path, NO_SCOPE, message="no component scope"), None

        collector = LiteralCollector(strings, binding.local_name, self.profile.hook_factory, self.cfg.hints)
        edits = collector.collect(src, scope)
        if not edits:
            return FileResult(path, UNCHANGED, accessor=binding.local_name), None

        result = FileResult(path, MODIFIED, replaced=len(dedupe_edits(edits)), accessor=binding.local_name)
        new_text = apply_edits(text, edits)
        # a bound hook gets no new import and no new statement, imported or not
        if not binding.exists:
            new_text, result.import_added = self.import_injector.inject(src, new_text, edits)

            hook = HookInjector(self.profile, parser, self.logger)
            hooked = hook.inject(new_text, binding.local_name, namespace)
            if hooked is None:
                result.status = HOOK_FAILED
                if self.cfg.rollback_on_hook_failure:
                    result.message = "no hook insertion point; file left untouched"
                    return result, None
                result.message = f"no hook insertion point; '{binding.local_name}' is left undefined"
            else:
                new_text = hooked
                result.hook_added = True

        if new_text == text:
            result.status = UNCHANGED
            return result, None
        return result, new_text

    def process_file(self, target: FileTarget) -> FileResult:
        path, ns = target.path, target.namespace
        if ns not in self.table or not self.table.namespace(ns):
            self.logger.debug(f"Skipped {path}: namespace '{ns}' has no strings")
            return FileResult(path, NO_NAMESPACE)
        if not os.path.exists(path):
            self.logger.error(f"File not found: {path}")
            return FileResult(path, ERROR, message="file not found")
        try:
            original = load_text(path)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Error reading {path}: {e}")
            return FileResult(path, ERROR, message=str(e))

        try:
            result, new_text = self.transform(path, original, ns)
        except ParseError as e:
            self.logger.error(f"Error parsing {path}: {e}")
            return FileResult(path, ERROR, message=str(e))
        except EditConflict as e:
            self.logger.error(f"Conflicting edits in {path}: {e}")
            return FileResult(path, ERROR, message=str(e))

        if result.status == NO_SCOPE:
            self.logger.debug(f"Skipped {path}: no component scope")
            return result
        if result.status == UNCHANGED:
            self.logger.debug(f"No matching strings in {path}")
            return result
        if result.status == HOOK_FAILED:
            self.logger.warning(f"Could not automatically inject hook in {path}: {result.message}")
            if self.cfg.rollback_on_hook_failure:
                return result

        if self.cfg.dry_run:
            self.logger.info(f"Would refactor {path} ({result.replaced} strings)")
            return result
        try:
            save_text_atomic(path, new_text)
        except OSError as e:
            self.logger.error(f"Error writing {path}: {e}")
            result.status, result.message = ERROR, str(e)
            return result
        result.written = True
        self.logger.info(f"Refactored {path} ({result.replaced} strings)")
        return result

    def run(self, targets: Iterable[FileTarget]) -> RunReport:
        report = RunReport()
        for target in targets:
            try:
                result = self.process_file(target)
            except Exception as e:
                # one broken file must not stop the batch
                self.logger.exception(f"Unexpected failure on {target.path}: {e}")
                result = FileResult(target.path, ERROR, message=str(e))
            report.add(result)
        counts = report.counts
        self.logger.info(
            f"Refactoring completed: {len(report.written)} file(s) written, "
            f"{report.strings_replaced} string(s) replaced, "
            f"{counts.get(NO_SCOPE, 0)} without component scope, "
            f"{counts.get(HOOK_FAILED, 0)} hook failure(s), {counts.get(ERROR, 0)} error(s)."
        )
        return report


def wrap_files(
    targets: Iterable[FileTarget],
    table: NamespaceStringTable,
    cfg: WrapConfig | None = None,
    logger: Optional[logging.Logger] = None,
) -> RunReport:
    return WrapDriver(table, cfg, logger=logger).run(targets)
