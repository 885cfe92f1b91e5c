# modular_pages/domain/modules/classifier.py
"""
Narrows untrusted CMS module records to a known variant.

The ``type`` tag is authoritative: it picks the candidate variant and the
payload check only confirms it. A record is never re-classified because its
shape happens to look like another variant.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from .types import KNOWN_VARIANTS, VARIANT_ALIASES, ModuleVariant

logger = logging.getLogger(__name__)

_BY_TAG: Dict[str, ModuleVariant] = {v.value: v for v in KNOWN_VARIANTS}


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _non_empty_items(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(isinstance(item, Mapping) for item in value)
    )


def _valid_hero(module: Mapping) -> bool:
    return _non_empty_str(module.get("title"))


def _valid_cta(module: Mapping) -> bool:
    return (
        _non_empty_str(module.get("title"))
        or _non_empty_str(module.get("description"))
        or _non_empty_str(module.get("content"))
        or _non_empty_items(module.get("buttons"))
    )


def _valid_featured_posts(module: Mapping) -> bool:
    posts = module.get("posts")
    if posts is not None and not isinstance(posts, (list, tuple)):
        return False
    return _non_empty_str(module.get("title"))


def _valid_form(module: Mapping) -> bool:
    form_id = module.get("form_id")
    return isinstance(form_id, int) and not isinstance(form_id, bool) and form_id > 0


def _valid_chart(module: Mapping) -> bool:
    data = module.get("data")
    if not isinstance(data, Mapping):
        return False
    return isinstance(data.get("labels"), (list, tuple)) and _non_empty_items(data.get("datasets"))


def _has_items(field: str) -> Callable[[Mapping], bool]:
    def check(module: Mapping) -> bool:
        return _non_empty_items(module.get(field))
    return check


def _has_text(field: str) -> Callable[[Mapping], bool]:
    def check(module: Mapping) -> bool:
        return _non_empty_str(module.get(field))
    return check


PAYLOAD_VALIDATORS: Dict[ModuleVariant, Callable[[Mapping], bool]] = {
    ModuleVariant.HERO: _valid_hero,
    ModuleVariant.CTA: _valid_cta,
    ModuleVariant.SELLING_POINTS: _has_items("points"),
    ModuleVariant.TESTIMONIALS: _has_items("testimonials"),
    ModuleVariant.FEATURED_POSTS: _valid_featured_posts,
    ModuleVariant.STATS: _has_items("stats"),
    ModuleVariant.GALLERY: _has_items("items"),
    ModuleVariant.TEXT: _has_text("content"),
    ModuleVariant.FORM: _valid_form,
    ModuleVariant.ACCORDION: _has_items("items"),
    ModuleVariant.TABS: _has_items("tabs"),
    ModuleVariant.VIDEO: _has_text("video_url"),
    ModuleVariant.CHART: _valid_chart,
}


def module_type(module: Any) -> Optional[ModuleVariant]:
    """
    Resolve the declared discriminant to a canonical variant.

    Falls back to ``template`` when ``type`` is absent. Returns None for
    unknown or non-string tags; the payload is not inspected.
    """
    if not isinstance(module, Mapping):
        return None

    tag = module.get("type")
    if tag is None:
        tag = module.get("template")
    if not isinstance(tag, str):
        return None

    return _BY_TAG.get(tag) or VARIANT_ALIASES.get(tag)


def classify(module: Any) -> ModuleVariant:
    """
    Classify a raw module as exactly one known variant or INVALID.

    Pure and total: depends only on the module's own fields and never raises.
    """
    variant = module_type(module)
    if variant is None:
        return ModuleVariant.INVALID

    try:
        valid = PAYLOAD_VALIDATORS[variant](module)
    except Exception:
        logger.warning("Payload check for %s module raised; treating as invalid", variant.value, exc_info=True)
        return ModuleVariant.INVALID

    return variant if valid else ModuleVariant.INVALID


def invalid_reason(module: Any) -> Optional[str]:
    """Human-readable reason a module classifies as INVALID, or None if it is valid."""
    if not isinstance(module, Mapping):
        return "module is not a mapping"

    variant = module_type(module)
    if variant is None:
        tag = module.get("type", module.get("template"))
        if tag is None:
            return "module is missing required 'type'"
        return f"unknown module type: {tag!r}"

    if classify(module) is ModuleVariant.INVALID:
        return f"{variant.value} module is missing its required content"

    return None


# Type guards

def is_hero_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.HERO


def is_cta_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.CTA


def is_selling_points_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.SELLING_POINTS


def is_testimonials_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.TESTIMONIALS


def is_featured_posts_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.FEATURED_POSTS


def is_stats_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.STATS


def is_gallery_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.GALLERY


def is_text_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.TEXT


def is_form_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.FORM


def is_accordion_module(module: Any) -> bool:
    """Also matches the legacy ``faq`` tag."""
    return classify(module) is ModuleVariant.ACCORDION


def is_tabs_module(module: Any) -> bool:
    """Also matches the legacy ``tabbed-content`` tag."""
    return classify(module) is ModuleVariant.TABS


def is_video_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.VIDEO


def is_chart_module(module: Any) -> bool:
    return classify(module) is ModuleVariant.CHART
