# i18n_wrap/cli.py
from __future__ import annotations
import argparse, json
from dataclasses import replace
from typing import List, Optional

from .logger import setup_logger
from .config import WrapConfig, load_config
from .table_loader import NamespaceStringTable, load_mapping, load_targets
from .validators import validate_inputs
from .profiles import resolve_profile
from .driver import WrapDriver
from .report import RunReport
from .catalog import seed_catalogs
from .utils import save_text_atomic

# ----------------- pipelines -----------------

def wrap(cfg: WrapConfig) -> RunReport:
    logger = setup_logger(cfg.log_level)
    logger.info("Loading extract map...")
    extract_map = load_mapping(cfg.extract_map_path)
    logger.info("Loading file map...")
    file_map = load_mapping(cfg.file_map_path)

    for issue in validate_inputs(extract_map, file_map):
        logger.warning(f"[{issue.kind}] {issue.namespace}: {issue.detail}")

    table = NamespaceStringTable.from_extract_map(extract_map)
    targets = load_targets(file_map, cfg.base_dir)
    profile = resolve_profile(cfg)
    logger.info(f"Profile: {profile.id} ({profile.hook_factory} from '{profile.hook_module}')")
    logger.info(f"Starting refactoring for {len(targets)} file(s)...")

    report = WrapDriver(table, cfg, profile=profile, logger=logger).run(targets)

    if cfg.report_path:
        save_text_atomic(cfg.report_path, json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        logger.info(f"Wrote {cfg.report_path}")
    return report

def seed(cfg: WrapConfig) -> dict:
    logger = setup_logger(cfg.log_level)
    if not cfg.messages_dir or not cfg.locales:
        raise SystemExit("seed-catalog needs --messages-dir and --locales")
    extract_map = load_mapping(cfg.extract_map_path)
    logger.info(f"Seeding {len(cfg.locales)} catalog(s) in {cfg.messages_dir}...")
    return seed_catalogs(extract_map, cfg.messages_dir, cfg.locales, cfg.source_locale, dry_run=cfg.dry_run, logger=logger)

# ----------------- argument parsing -----------------

def _config_from_args(args: argparse.Namespace) -> WrapConfig:
    overrides = {
        "extract_map_path": args.extract_map,
        "log_level": args.log_level,
        "dry_run": True if args.dry_run else None,
    }
    if args.cmd == "wrap":
        overrides.update({
            "file_map_path": args.file_map,
            "base_dir": args.base_dir,
            "profile": args.profile,
            "hook_factory": args.hook_factory,
            "hook_module": args.hook_module,
            "accessor_name": args.accessor,
            "rollback_on_hook_failure": True if args.rollback_on_hook_failure else None,
            "report_path": args.report,
        })
    else:
        overrides.update({
            "messages_dir": args.messages_dir,
            "locales": args.locales,
            "source_locale": args.source_locale,
        })
    if args.config:
        return load_config(args.config, **overrides)
    return replace(WrapConfig(), **{k: v for k, v in overrides.items() if v is not None})

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="i18n-wrap", description="Replace hardcoded UI strings in React components with translation calls")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--extract-map", default=None, help="JSON/YAML {namespace: {key: literal}}")
        p.add_argument("--config", default=None, help="YAML file with WrapConfig fields")
        p.add_argument("--log-level", default=None)
        p.add_argument("--dry-run", action="store_true")

    w = sub.add_parser("wrap", help="Rewrite component files in place")
    common(w)
    w.add_argument("--file-map", default=None, help="JSON/YAML {filePath: namespace}")
    w.add_argument("--base-dir", default=None, help="Directory relative file-map paths resolve against")
    w.add_argument("--profile", default=None, help="next-intl|react-i18next|auto")
    w.add_argument("--hook-factory", default=None)
    w.add_argument("--hook-module", default=None)
    w.add_argument("--accessor", default=None, help="Accessor name for new hook bindings (default: t)")
    w.add_argument("--rollback-on-hook-failure", action="store_true",
                   help="Leave a file untouched when the hook statement cannot be placed.")
    w.add_argument("--report", default=None, help="Write a JSON run report here")

    s = sub.add_parser("seed-catalog", help="Add missing keys to messages/<locale>.json")
    common(s)
    s.add_argument("--messages-dir", default=None)
    s.add_argument("--locales", nargs="+", default=None)
    s.add_argument("--source-locale", default=None)

    args = ap.parse_args(argv)
    cfg = _config_from_args(args)
    if not cfg.extract_map_path:
        ap.error("--extract-map is required (or extract_map_path in --config)")

    if args.cmd == "wrap":
        if not cfg.file_map_path:
            ap.error("--file-map is required (or file_map_path in --config)")
        report = wrap(cfg)
        return 1 if report.has_errors else 0

    seed(cfg)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
