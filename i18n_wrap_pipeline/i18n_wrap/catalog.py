# i18n_wrap/catalog.py
from __future__ import annotations
import json
import logging
import os
from typing import Any, Dict, List, Mapping

from .logger import get_logger
from .utils import load_text, save_text_atomic

def _sorted_catalog(data: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for ns in sorted(data):
        entries = data[ns]
        out[ns] = {k: entries[k] for k in sorted(entries)} if isinstance(entries, dict) else entries
    return out

def seed_catalog(
    catalog: Dict[str, Any],
    extract_map: Mapping[str, Any],
    locale: str,
    source_locale: str,
) -> int:
    """
    Add every namespace.key of extract_map missing from catalog (in place).
    The source locale gets the literal itself; other locales get "[LOCALE] literal"
    so untranslated copy stands out. Existing values are kept.
    """
    injected = 0
    for ns, entries in extract_map.items():
        if not isinstance(entries, dict):
            continue
        bucket = catalog.get(ns)
        if not isinstance(bucket, dict):
            bucket = {}
            catalog[ns] = bucket
        for key, literal in entries.items():
            if not isinstance(literal, str) or key in bucket:
                continue
            bucket[key] = literal if locale == source_locale else f"[{locale.upper()}] {literal}"
            injected += 1
    return injected

def seed_catalogs(
    extract_map: Mapping[str, Any],
    messages_dir: str,
    locales: List[str],
    source_locale: str,
    *,
    dry_run: bool = False,
    logger: logging.Logger | None = None,
) -> Dict[str, int]:
    """Seed <messages_dir>/<locale>.json for each locale; returns injected counts per locale."""
    logger = logger or get_logger()
    counts: Dict[str, int] = {}
    for locale in locales:
        path = os.path.join(messages_dir, f"{locale}.json")
        catalog: Dict[str, Any] = {}
        if os.path.exists(path):
            catalog = json.loads(load_text(path) or "{}")
            if not isinstance(catalog, dict):
                raise ValueError(f"{path}: message catalog must be a JSON object")
        injected = seed_catalog(catalog, extract_map, locale, source_locale)
        counts[locale] = injected
        if dry_run:
            logger.info(f"Would inject {injected} missing translation(s) into {locale}.json")
            continue
        save_text_atomic(path, json.dumps(_sorted_catalog(catalog), ensure_ascii=False, indent=2) + "\n")
        logger.info(f"Injected {injected} missing translation(s) into {locale}.json")
    return counts
