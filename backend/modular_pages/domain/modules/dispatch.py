# modular_pages/domain/modules/dispatch.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from modular_pages.domain.auth_state import AuthState
from modular_pages.normalizers import modules as routines

from .classifier import classify, invalid_reason
from .types import KNOWN_VARIANTS, ModuleVariant

logger = logging.getLogger(__name__)

RenderRoutine = Callable[[Mapping], Dict[str, Any]]


@dataclass(frozen=True)
class RenderConfig:
    """Explicit pipeline settings; nothing is read from the environment."""
    show_diagnostics: bool = False

    @classmethod
    def from_app_config(cls, config: Mapping) -> "RenderConfig":
        return cls(show_diagnostics=bool(config.get("MODULE_DIAGNOSTICS", False)))


RENDERERS: Dict[ModuleVariant, RenderRoutine] = {
    ModuleVariant.HERO: routines.normalize_hero,
    ModuleVariant.CTA: routines.normalize_cta,
    ModuleVariant.SELLING_POINTS: routines.normalize_selling_points,
    ModuleVariant.TESTIMONIALS: routines.normalize_testimonials,
    ModuleVariant.FEATURED_POSTS: routines.normalize_featured_posts,
    ModuleVariant.STATS: routines.normalize_stats,
    ModuleVariant.GALLERY: routines.normalize_gallery,
    ModuleVariant.TEXT: routines.normalize_text,
    ModuleVariant.FORM: routines.normalize_form,
    ModuleVariant.ACCORDION: routines.normalize_accordion,
    ModuleVariant.TABS: routines.normalize_tabs,
    ModuleVariant.VIDEO: routines.normalize_video,
    ModuleVariant.CHART: routines.normalize_chart,
}


def assert_dispatch_complete(table: Mapping[ModuleVariant, RenderRoutine]) -> None:
    """Every known variant has exactly one routine and INVALID has none."""
    missing = KNOWN_VARIANTS - set(table)
    extra = set(table) - KNOWN_VARIANTS
    if missing or extra:
        raise RuntimeError(
            f"Render dispatch table out of sync: missing={sorted(v.value for v in missing)} "
            f"extra={sorted(v.value for v in extra)}"
        )


assert_dispatch_complete(RENDERERS)


def is_gated(module: Any) -> bool:
    if not isinstance(module, Mapping):
        return False
    if module.get("requires_auth") is not None:
        return module.get("requires_auth") is True
    settings = module.get("settings")
    return isinstance(settings, Mapping) and settings.get("requires_auth") is True


def diagnostic(module: Any, reason: str) -> Dict[str, Any]:
    """Visible placeholder emitted instead of a skipped module when diagnostics are on."""
    record = module if isinstance(module, Mapping) else {}
    return {
        "type": "diagnostic",
        "id": record.get("id"),
        "module_type": record.get("type", record.get("template")),
        "title": record.get("title"),
        "reason": reason,
    }


def render_module(
    module: Any,
    *,
    config: Optional[RenderConfig] = None,
    auth_state: AuthState = AuthState.ANONYMOUS,
) -> Optional[Dict[str, Any]]:
    """
    Render one module, or None when it should produce no output.

    Faults stay local to the module: invalid payloads and routine errors
    are logged and skipped (or turned into a diagnostic placeholder).
    """
    config = config or RenderConfig()

    if is_gated(module) and auth_state is not AuthState.AUTHENTICATED:
        return None

    variant = classify(module)
    if variant is ModuleVariant.INVALID:
        reason = invalid_reason(module) or "invalid module"
        logger.debug("Skipping module: %s", reason)
        return diagnostic(module, reason) if config.show_diagnostics else None

    try:
        return RENDERERS[variant](module)
    except Exception as exc:
        logger.exception("Error rendering %s module %r", variant.value, module.get("id"))
        if config.show_diagnostics:
            return diagnostic(module, f"error in {variant.value} module: {exc}")
        return None
