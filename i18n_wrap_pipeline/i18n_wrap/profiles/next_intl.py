from __future__ import annotations
from . import FrameworkProfile

def next_intl_profile() -> FrameworkProfile:
    return FrameworkProfile(
        id="next-intl",
        hook_factory="useTranslations",
        hook_module="next-intl",
        packages=("next-intl",),
    )
