"""Tests for i18n_wrap.cli."""

import json

from conftest import write

from i18n_wrap.cli import main


def test_wrap_command_rewrites_and_reports(tmp_path):
    page = write(tmp_path, "app/page.tsx", "export default function Page() { return <h1>Your Favorite Flavors</h1>; }")
    extract = write(tmp_path, "extract.json", json.dumps({"Landing": {"heroTitle": "Your Favorite Flavors"}}))
    files = write(tmp_path, "files.json", json.dumps({"app/page.tsx": "Landing"}))
    report = tmp_path / "report.json"

    code = main([
        "wrap", "--extract-map", str(extract), "--file-map", str(files),
        "--base-dir", str(tmp_path), "--report", str(report),
    ])
    assert code == 0
    assert "{t('heroTitle')}" in page.read_text(encoding="utf-8")
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["strings_replaced"] == 1
    assert data["counts"] == {"modified": 1}


def test_wrap_command_returns_1_on_errors(tmp_path):
    extract = write(tmp_path, "extract.json", json.dumps({"Landing": {"a": "A"}}))
    files = write(tmp_path, "files.json", json.dumps({"missing.tsx": "Landing"}))
    assert main(["wrap", "--extract-map", str(extract), "--file-map", str(files), "--base-dir", str(tmp_path)]) == 1


def test_wrap_from_config_file(tmp_path):
    page = write(tmp_path, "Page.tsx", "export default function Page() { return <p>A</p>; }")
    write(tmp_path, "extract.yaml", "Ns:\n  a: A\n")
    write(tmp_path, "files.yaml", "Page.tsx: Ns\n")
    conf = write(tmp_path, "wrap.yaml", (
        f"extract_map_path: {tmp_path / 'extract.yaml'}\n"
        f"file_map_path: {tmp_path / 'files.yaml'}\n"
        f"base_dir: {tmp_path}\n"
    ))
    assert main(["wrap", "--config", str(conf), "--dry-run"]) == 0
    assert page.read_text(encoding="utf-8") == "export default function Page() { return <p>A</p>; }"


def test_seed_catalog_command(tmp_path):
    extract = write(tmp_path, "extract.json", json.dumps({"Ns": {"a": "Merhaba"}}))
    messages = tmp_path / "messages"
    messages.mkdir()
    assert main(["seed-catalog", "--extract-map", str(extract), "--messages-dir", str(messages), "--locales", "tr", "en"]) == 0
    assert json.loads((messages / "en.json").read_text(encoding="utf-8")) == {"Ns": {"a": "[EN] Merhaba"}}
    assert json.loads((messages / "tr.json").read_text(encoding="utf-8")) == {"Ns": {"a": "Merhaba"}}
