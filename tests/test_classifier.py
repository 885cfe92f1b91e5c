"""Tests for module classification."""
import pytest

from modular_pages.domain.modules.classifier import (
    classify,
    invalid_reason,
    is_accordion_module,
    is_cta_module,
    is_hero_module,
    is_stats_module,
    is_tabs_module,
    is_testimonials_module,
    module_type,
)
from modular_pages.domain.modules.types import KNOWN_VARIANTS, ModuleVariant


VALID_MODULES = {
    ModuleVariant.HERO: {"id": 1, "type": "hero", "title": "Welcome"},
    ModuleVariant.CTA: {"id": 2, "type": "cta", "title": "Join us"},
    ModuleVariant.SELLING_POINTS: {
        "id": 3, "type": "selling-points", "points": [{"title": "Fast", "content": "Really fast"}],
    },
    ModuleVariant.TESTIMONIALS: {
        "id": 4, "type": "testimonials", "testimonials": [{"author_name": "Ada", "content": "Great"}],
    },
    ModuleVariant.FEATURED_POSTS: {"id": 5, "type": "featured-posts", "title": "Latest", "posts": []},
    ModuleVariant.STATS: {"id": 6, "type": "stats", "stats": [{"value": "98%", "label": "Uptime"}]},
    ModuleVariant.GALLERY: {"id": 7, "type": "gallery", "items": [{"image": "/a.jpg"}]},
    ModuleVariant.TEXT: {"id": 8, "type": "text", "content": "<p>Hello</p>"},
    ModuleVariant.FORM: {"id": 9, "type": "form", "form_id": 12},
    ModuleVariant.ACCORDION: {"id": 10, "type": "accordion", "items": [{"question": "Q", "answer": "A"}]},
    ModuleVariant.TABS: {"id": 11, "type": "tabs", "tabs": [{"title": "One", "content": "1"}]},
    ModuleVariant.VIDEO: {"id": 12, "type": "video", "video_url": "https://youtu.be/x"},
    ModuleVariant.CHART: {
        "id": 13, "type": "chart", "data": {"labels": ["a"], "datasets": [{"label": "s", "data": [1]}]},
    },
}


def test_every_known_variant_has_a_valid_sample():
    assert set(VALID_MODULES) == set(KNOWN_VARIANTS)


@pytest.mark.parametrize("variant,module", list(VALID_MODULES.items()), ids=lambda v: v.value if isinstance(v, ModuleVariant) else None)
def test_valid_modules_classify_as_their_variant(variant, module):
    assert classify(module) is variant
    assert invalid_reason(module) is None


def test_empty_testimonials_is_invalid():
    module = {"id": 1, "type": "testimonials", "testimonials": []}
    assert classify(module) is ModuleVariant.INVALID

    module["testimonials"] = [{"author_name": "Ada", "content": "Great"}]
    assert classify(module) is ModuleVariant.TESTIMONIALS


@pytest.mark.parametrize("module", [
    {"id": 1, "type": "hero"},
    {"id": 1, "type": "hero", "title": "   "},
    {"id": 1, "type": "cta"},
    {"id": 1, "type": "stats", "stats": []},
    {"id": 1, "type": "gallery", "items": ["not-a-mapping"]},
    {"id": 1, "type": "text", "content": ""},
    {"id": 1, "type": "form", "form_id": 0},
    {"id": 1, "type": "form", "form_id": True},
    {"id": 1, "type": "form", "form_id": "12"},
    {"id": 1, "type": "video"},
    {"id": 1, "type": "chart", "data": {"labels": [], "datasets": []}},
    {"id": 1, "type": "chart", "data": []},
    {"id": 1, "type": "featured-posts", "title": "Latest", "posts": "nope"},
    {"id": 1, "type": "tabs", "tabs": None},
])
def test_missing_or_empty_payload_is_invalid(module):
    assert classify(module) is ModuleVariant.INVALID
    assert "missing its required content" in invalid_reason(module)


@pytest.mark.parametrize("module", [
    None,
    42,
    "hero",
    [],
    {},
    {"id": 1},
    {"id": 1, "type": None},
    {"id": 1, "type": 5},
    {"id": 1, "type": ["hero"]},
    {"id": 1, "type": "unsupported-future-type", "title": "x"},
    {"id": 1, "type": "invalid"},
    {"id": 1, "type": "HERO", "title": "case matters"},
])
def test_classification_is_total(module):
    assert classify(module) is ModuleVariant.INVALID
    assert invalid_reason(module)


def test_unknown_type_reason_names_the_type():
    assert invalid_reason({"type": "unsupported-future-type"}) == "unknown module type: 'unsupported-future-type'"
    assert invalid_reason({"id": 3}) == "module is missing required 'type'"
    assert invalid_reason(None) == "module is not a mapping"


def test_type_tag_wins_over_payload_shape():
    # Carries a perfectly good testimonials payload but declares itself as stats
    module = {
        "id": 1,
        "type": "stats",
        "testimonials": [{"author_name": "Ada", "content": "Great"}],
        "points": [{"title": "x"}],
    }
    assert classify(module) is ModuleVariant.INVALID
    assert not is_testimonials_module(module)
    assert not is_stats_module(module)


def test_legacy_aliases_resolve_to_canonical_variant():
    assert classify({"type": "faq", "items": [{"question": "Q", "answer": "A"}]}) is ModuleVariant.ACCORDION
    assert classify({"type": "tabbed-content", "tabs": [{"title": "T"}]}) is ModuleVariant.TABS
    assert classify({"type": "selling_points", "points": [{"title": "P"}]}) is ModuleVariant.SELLING_POINTS
    assert is_accordion_module({"type": "faq", "items": [{"question": "Q"}]})
    assert is_tabs_module({"type": "tabbed-content", "tabs": [{"title": "T"}]})


def test_template_field_is_used_when_type_is_absent():
    assert module_type({"template": "hero"}) is ModuleVariant.HERO
    assert classify({"template": "cta", "description": "Sign up"}) is ModuleVariant.CTA
    # type takes precedence over template
    assert module_type({"type": "text", "template": "hero"}) is ModuleVariant.TEXT


def test_guards_agree_with_classify():
    hero = VALID_MODULES[ModuleVariant.HERO]
    cta = VALID_MODULES[ModuleVariant.CTA]
    assert is_hero_module(hero) and not is_cta_module(hero)
    assert is_cta_module(cta) and not is_hero_module(cta)


def test_classify_does_not_mutate_input():
    module = {"id": 1, "type": "stats", "stats": [{"value": "1", "label": "one"}]}
    before = {"id": 1, "type": "stats", "stats": [{"value": "1", "label": "one"}]}
    classify(module)
    invalid_reason(module)
    assert module == before
