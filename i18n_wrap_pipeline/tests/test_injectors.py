"""Tests for i18n_wrap.injectors: import placement and hook statement placement."""

import logging

from i18n_wrap.applier import Edit, apply_edits
from i18n_wrap.injectors import HookInjector, ImportInjector
from i18n_wrap.parser import SourceParser
from i18n_wrap.profiles import get_profile

NEXT_INTL = get_profile("next-intl")
IMPORT = "import { useTranslations } from 'next-intl';"


def test_import_goes_after_last_import(parse):
    code = "import React from 'react';\nimport x from './x';\n\nexport default function P() { return null; }\n"
    out, added = ImportInjector(NEXT_INTL).inject(parse(code), code)
    assert added is True
    assert out == (
        "import React from 'react';\nimport x from './x';\n" + IMPORT +
        "\n\nexport default function P() { return null; }\n"
    )


def test_import_anchor_follows_earlier_edits(parse):
    code = "import a from 'a';\nexport default function P() { return <p>Hi</p>; }\n"
    src = parse(code)
    # an edit before the anchor shifts it
    edits = [Edit(7, 8, "alpha")]
    text = apply_edits(code, edits)
    out, _ = ImportInjector(NEXT_INTL).inject(src, text, edits)
    assert out.startswith("import alpha from 'a';\n" + IMPORT + "\n")


def test_import_is_prepended_without_imports(parse):
    code = "export default function P() { return null; }"
    out, added = ImportInjector(NEXT_INTL).inject(parse(code), code)
    assert added
    assert out == IMPORT + "\n" + code


def test_use_client_stays_first(parse):
    code = "'use client';\n\nexport default function P() { return null; }\n"
    out, _ = ImportInjector(NEXT_INTL).inject(parse(code), code)
    assert out == "'use client';\n" + IMPORT + "\n\nexport default function P() { return null; }\n"


def test_existing_import_is_not_duplicated(parse):
    code = "import { useTranslations, useLocale } from 'next-intl';\nexport default function P() { return null; }\n"
    out, added = ImportInjector(NEXT_INTL).inject(parse(code), code)
    assert added is False
    assert out == code


def test_existing_import_from_other_module_counts(parse):
    code = "import { useTranslations } from '@/i18n/client';\nexport default function P() { return null; }\n"
    _, added = ImportInjector(NEXT_INTL).inject(parse(code), code)
    assert added is False


def test_crlf_newlines_are_kept(parse):
    code = "import a from 'a';\r\nexport default function P() { return null; }\r\n"
    out, _ = ImportInjector(NEXT_INTL).inject(parse(code), code)
    assert "import a from 'a';\r\n" + IMPORT + "\r\n" in out


def _hook():
    return HookInjector(NEXT_INTL, SourceParser("tsx"), logging.getLogger("i18n-wrap"))


def test_hook_on_one_line_body():
    code = "export default function Page() { return <h1>{t('heroTitle')}</h1>; }"
    out = _hook().inject(code, "t", "Landing")
    assert out == "export default function Page() { const t = useTranslations('Landing'); return <h1>{t('heroTitle')}</h1>; }"


def test_hook_on_multi_line_body_reuses_indent():
    code = "export default function Page() {\n    const a = 1;\n    return a;\n}\n"
    out = _hook().inject(code, "t", "Landing")
    assert out == (
        "export default function Page() {\n    const t = useTranslations('Landing');\n"
        "    const a = 1;\n    return a;\n}\n"
    )


def test_hook_in_empty_body():
    out = _hook().inject("export default function Page() {}", "t", "Landing")
    assert out == "export default function Page() { const t = useTranslations('Landing'); }"


def test_hook_in_identifier_export_arrow():
    code = "const Page = () => {\n  return null;\n};\nexport default Page;\n"
    out = _hook().inject(code, "t", "Ns")
    assert "const Page = () => {\n  const t = useTranslations('Ns');\n  return null;\n};" in out


def test_hook_fails_for_expression_body():
    assert _hook().inject("const Page = () => <p>x</p>;\nexport default Page;\n", "t", "Ns") is None


def test_hook_fails_when_text_no_longer_parses():
    assert _hook().inject("export default function Page() { return <p>; }", "t", "Ns") is None


def test_destructured_hook_statement():
    profile = get_profile("react-i18next")
    hook = HookInjector(profile, SourceParser("tsx"))
    out = hook.inject("export default function Page() { return null; }", "t", "common")
    assert "{ const { t } = useTranslation('common'); return null; }" in out
