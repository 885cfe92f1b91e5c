"""Tests for page skeleton composition."""
from modular_pages.domain.modules.layout import DEFAULT_SECTION_LAYOUTS, compose, merge_layouts
from modular_pages.domain.modules.sections import group_modules_by_section


def _buckets(**sections):
    buckets = {"header": [], "main": [], "sidebar": [], "footer": [], "other": []}
    buckets.update(sections)
    return buckets


def test_empty_sidebar_has_no_region():
    skeleton = compose(_buckets(main=[{"id": 1}]))

    assert skeleton.sidebar is None
    assert [r.section for r in skeleton.regions] == ["main"]
    assert "aside" not in [r["element"] for r in skeleton.to_dict()["regions"]]


def test_regions_follow_presentation_order():
    skeleton = compose(_buckets(
        other=[{"id": 5}],
        footer=[{"id": 4}],
        sidebar=[{"id": 3}],
        main=[{"id": 2}],
        header=[{"id": 1}],
    ))

    assert [r.section for r in skeleton.regions] == ["header", "main", "sidebar", "footer", "other"]
    assert [r.element for r in skeleton.regions] == ["header", "main", "aside", "footer", "div"]
    assert [r.section for r in skeleton.body] == ["main", "sidebar"]
    assert skeleton.to_dict()["body"] == ["main", "sidebar"]


def test_defaults_apply_without_overrides():
    skeleton = compose(_buckets(header=[{"id": 1}], main=[{"id": 2}], sidebar=[{"id": 3}]))

    assert skeleton.header.layout == "full"
    assert skeleton.main.layout == "fill"
    assert skeleton.sidebar.layout == "1/4"
    assert skeleton.layouts == DEFAULT_SECTION_LAYOUTS


def test_override_replaces_only_its_bucket():
    skeleton = compose(
        _buckets(header=[{"id": 1}], main=[{"id": 2}], sidebar=[{"id": 3}], footer=[{"id": 4}]),
        {"sidebar": "custom-class"},
    )

    assert skeleton.sidebar.layout == "custom-class"
    assert skeleton.header.layout == DEFAULT_SECTION_LAYOUTS["header"]
    assert skeleton.main.layout == DEFAULT_SECTION_LAYOUTS["main"]
    assert skeleton.footer.layout == DEFAULT_SECTION_LAYOUTS["footer"]


def test_override_is_not_deep_merged():
    layouts = merge_layouts({"main": {"weight": 3}})
    assert layouts["main"] == {"weight": 3}


def test_unknown_override_keys_are_ignored():
    layouts = merge_layouts({"sidebar": "1/3", "hero-zone": "wide", "": "x"})

    assert layouts["sidebar"] == "1/3"
    assert set(layouts) == set(DEFAULT_SECTION_LAYOUTS)


def test_malformed_overrides_fall_back_to_defaults():
    assert merge_layouts(["sidebar"]) == DEFAULT_SECTION_LAYOUTS
    assert merge_layouts("1/3") == DEFAULT_SECTION_LAYOUTS

    skeleton = compose({"main": [1]}, ["sidebar"])
    assert skeleton.main.layout == "fill"


def test_merge_does_not_touch_defaults():
    merge_layouts({"sidebar": "1/3"})
    assert DEFAULT_SECTION_LAYOUTS["sidebar"] == "1/4"


def test_empty_page_is_a_valid_empty_skeleton():
    skeleton = compose(group_modules_by_section([]))

    assert skeleton.is_empty
    assert skeleton.regions == []
    assert skeleton.to_dict() == {"regions": [], "is_empty": True}


def test_render_results_of_none_are_dropped_and_empty_regions_omitted():
    buckets = _buckets(main=[{"id": 1, "keep": True}, {"id": 2}], sidebar=[{"id": 3}])

    skeleton = compose(buckets, render=lambda m: {"id": m["id"]} if m.get("keep") else None)

    assert skeleton.main.modules == [{"id": 1}]
    assert skeleton.sidebar is None


def test_compose_is_deterministic():
    buckets = _buckets(header=[{"id": 1}], main=[{"id": 2}, {"id": 3}])

    first = compose(buckets, {"main": "2/3"}).to_dict()
    second = compose(buckets, {"main": "2/3"}).to_dict()

    assert first == second
