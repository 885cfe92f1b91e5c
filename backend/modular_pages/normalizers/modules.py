# modular_pages/normalizers/modules.py
"""
Render routines for each module variant.

Every routine receives a module already classified as its variant and
returns a fresh, JSON-safe dict with CMS defaults applied. The input record
is never modified.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

from modular_pages.domain.modules.types import ModuleVariant


def _base(module: Mapping, variant: ModuleVariant) -> Dict[str, Any]:
    return {
        "id": module.get("id"),
        "type": variant.value,
        "title": module.get("title") or "",
    }


def _buttons(module: Mapping) -> List[Dict[str, Any]]:
    buttons = module.get("buttons") or []
    return [
        {
            "text": b.get("text", ""),
            "url": b.get("url", ""),
            "style": b.get("style", "primary"),
            "new_tab": bool(b.get("new_tab", False)),
        }
        for b in buttons
        if isinstance(b, Mapping)
    ]


def normalize_hero(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.HERO)
    data.update({
        "intro": module.get("intro") or module.get("description") or "",
        "image": module.get("image") or "",
        "video_url": module.get("video_url"),
        "buttons": _buttons(module),
        "overlay_opacity": module.get("overlay_opacity", 0.3),
        "text_color": module.get("text_color"),
        "height": module.get("height"),
        "alignment": module.get("alignment") or "center",
    })
    return data


def normalize_cta(module: Mapping) -> Dict[str, Any]:
    buttons = _buttons(module)
    first = buttons[0] if buttons else {}

    data = _base(module, ModuleVariant.CTA)
    data.update({
        "description": module.get("description") or module.get("content") or "",
        "button_text": first.get("text", ""),
        "button_url": first.get("url", ""),
        "buttons": buttons,
        "background_color": module.get("background_color") or "",
        "text_color": module.get("text_color") or "",
        "alignment": module.get("alignment") or module.get("layout") or "center",
        "image": module.get("image") or module.get("featured_image") or "",
    })
    return data


def normalize_selling_points(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.SELLING_POINTS)
    data.update({
        "points": [
            {
                "id": p.get("id", 0),
                "title": p.get("title", ""),
                "content": p.get("content", ""),
                "description": p.get("description", ""),
                "icon": p.get("icon", ""),
            }
            for p in module["points"]
        ],
        "layout": module.get("layout") or "grid",
        "columns": module.get("columns") or 3,
    })
    return data


def normalize_testimonials(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.TESTIMONIALS)
    data.update({
        "testimonials": [
            {
                "id": t.get("id", 0),
                "content": t.get("content", ""),
                "author_name": t.get("author_name", ""),
                "author_position": t.get("author_position", ""),
                "author_image": t.get("author_image", ""),
            }
            for t in module["testimonials"]
        ],
        "display_style": module.get("display_style") or "carousel",
        "display_count": module.get("display_count") or 3,
    })
    return data


def normalize_featured_posts(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.FEATURED_POSTS)
    data.update({
        "subtitle": module.get("subtitle") or "",
        "posts": [dict(p) for p in module.get("posts") or [] if isinstance(p, Mapping)],
        "display_style": module.get("display_style") or "grid",
        "columns": module.get("columns") or 3,
        "show_excerpt": module.get("show_excerpt") is not False,
        "show_categories": module.get("show_categories") is not False,
        "show_read_more": module.get("show_read_more") is not False,
    })
    return data


def normalize_stats(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.STATS)
    data.update({
        "subtitle": module.get("subtitle") or "",
        "stats": [
            {
                "id": s.get("id", 0),
                "value": str(s.get("value", "")),
                "label": s.get("label", ""),
                "icon": s.get("icon", ""),
            }
            for s in module["stats"]
        ],
        "background_color": module.get("background_color"),
        "layout": module.get("layout") or "grid",
        "columns": module.get("columns") or 4,
    })
    return data


def normalize_gallery(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.GALLERY)
    data.update({
        "items": [
            {
                "id": i.get("id", 0),
                "image": i.get("image", ""),
                "title": i.get("title", ""),
                "description": i.get("description", ""),
            }
            for i in module["items"]
        ],
        "layout": module.get("layout") or "grid",
        "columns": module.get("columns") or 3,
        "enable_lightbox": module.get("enable_lightbox") is not False,
    })
    return data


def normalize_text(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.TEXT)
    data.update({
        "content": module["content"],
        "alignment": module.get("alignment") or "left",
        "text_size": module.get("text_size") or "medium",
        "enable_columns": bool(module.get("enable_columns", False)),
        "columns_count": module.get("columns_count") or 2,
    })
    return data


def normalize_form(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.FORM)
    data.update({
        "form_id": module["form_id"],
        "description": module.get("description") or "",
        "success_message": module.get("success_message") or "",
        "error_message": module.get("error_message") or "",
        "redirect_url": module.get("redirect_url") or "",
    })
    return data


def normalize_accordion(module: Mapping) -> Dict[str, Any]:
    # faq records carry question/answer, older accordion records title/content
    data = _base(module, ModuleVariant.ACCORDION)
    data.update({
        "items": [
            {
                "id": i.get("id", 0),
                "question": i.get("question") or i.get("title", ""),
                "answer": i.get("answer") or i.get("content", ""),
                "icon": i.get("icon", ""),
            }
            for i in module["items"]
        ],
        "allow_multiple_open": bool(module.get("allow_multiple_open", False)),
        "default_open_index": module.get("default_open_index"),
        "icon_position": module.get("icon_position") or "right",
    })
    return data


def normalize_tabs(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.TABS)
    data.update({
        "tabs": [
            {
                "id": t.get("id", 0),
                "title": t.get("title", ""),
                "content": t.get("content", ""),
                "icon": t.get("icon", ""),
            }
            for t in module["tabs"]
        ],
        "orientation": module.get("orientation") or "horizontal",
        "default_tab_index": module.get("default_tab_index") or 0,
    })
    return data


def normalize_video(module: Mapping) -> Dict[str, Any]:
    data = _base(module, ModuleVariant.VIDEO)
    data.update({
        "video_url": module["video_url"],
        "video_type": module.get("video_type") or "youtube",
        "poster_image": module.get("poster_image") or "",
        "autoplay": bool(module.get("autoplay", False)),
        "loop": bool(module.get("loop", False)),
        "muted": bool(module.get("muted", False)),
        "controls": module.get("controls") is not False,
        "allow_fullscreen": module.get("allow_fullscreen") is not False,
    })
    return data


def normalize_chart(module: Mapping) -> Dict[str, Any]:
    chart = module["data"]

    data = _base(module, ModuleVariant.CHART)
    data.update({
        "chart_type": module.get("chart_type") or "bar",
        "data": {
            "labels": list(chart["labels"]),
            "datasets": [dict(ds) for ds in chart["datasets"]],
        },
        "options": dict(module.get("options") or {}),
    })
    return data
