from __future__ import annotations
from . import FrameworkProfile

def react_i18next_profile() -> FrameworkProfile:
    # const { t } = useTranslation('ns');
    return FrameworkProfile(
        id="react-i18next",
        hook_factory="useTranslation",
        hook_module="react-i18next",
        destructure_property="t",
        packages=("react-i18next",),
    )
