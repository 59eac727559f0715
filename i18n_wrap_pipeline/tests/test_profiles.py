"""Tests for i18n_wrap.profiles."""

import json

import pytest

from conftest import write

from i18n_wrap.config import WrapConfig
from i18n_wrap.profiles import get_profile, pick_profile, resolve_profile


def test_next_intl_statements():
    p = get_profile("next-intl")
    assert p.import_statement() == "import { useTranslations } from 'next-intl';"
    assert p.hook_statement("t", "Landing") == "const t = useTranslations('Landing');"


def test_react_i18next_statements():
    p = get_profile("react-i18next")
    assert p.import_statement() == "import { useTranslation } from 'react-i18next';"
    assert p.hook_statement("t", "common") == "const { t } = useTranslation('common');"
    assert p.hook_statement("tx", "common") == "const { t: tx } = useTranslation('common');"


def test_namespace_is_quoted():
    assert get_profile("next-intl").hook_statement("t", "It's") == "const t = useTranslations('It\\'s');"


def test_unknown_profile():
    with pytest.raises(ValueError):
        get_profile("vue-i18n")


def test_pick_profile_from_package_json(tmp_path):
    pkg = write(tmp_path, "package.json", json.dumps({"dependencies": {"react": "18", "react-i18next": "14"}}))
    assert pick_profile(str(pkg)).id == "react-i18next"
    assert pick_profile(str(tmp_path / "missing.json")).id == "next-intl"


def test_resolve_profile_auto_and_overrides(tmp_path):
    write(tmp_path, "package.json", json.dumps({"devDependencies": {"next-intl": "3"}}))
    cfg = WrapConfig(profile="auto", base_dir=str(tmp_path), hook_module="@/i18n")
    p = resolve_profile(cfg)
    assert p.id == "next-intl"
    assert p.hook_factory == "useTranslations"
    assert p.hook_module == "@/i18n"
    # the registered profile is not mutated
    assert get_profile("next-intl").hook_module == "next-intl"
