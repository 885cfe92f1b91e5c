from typing import Any, Dict, Optional

from modular_pages.domain.modules.layout import PageSkeleton


def normalize_skeleton(skeleton: PageSkeleton) -> Dict[str, Any]:
    data = skeleton.to_dict()
    data["layouts"] = dict(skeleton.layouts)
    return data


def normalize_page(page, rendered: Optional[Dict[str, Any]] = None, admin=False):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "status": page.status if admin else None,
    }

    if rendered is not None:
        data["content"] = rendered

    if admin:
        data["modules"] = [m.to_record() for m in page.modules]
        data["layout"] = page.layout or {}
        data["created_at"] = page.created_at.isoformat() if page.created_at else None

    return data
