from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from modular_pages.models.page import Page
from modular_pages.models.page_module import PageModule
from modular_pages.domain.invariants.page import assert_page
from modular_pages.utils.transaction import transactional

# Columns on PageModule; every other record key is variant payload
MODULE_COLUMNS = ("type", "title", "order", "placement", "requires_auth", "settings")

PAGE_STATUSES = ("draft", "published")


def build_module(record: Dict[str, Any], position: int) -> PageModule:
    settings = record.get("settings") or {}

    module = PageModule()
    module.type = record.get("type") or record.get("template")
    module.title = record.get("title")
    module.order = record.get("order", position)
    module.placement = record.get("placement")
    # A top-level flag wins; otherwise the gate may be declared in settings
    gate = record.get("requires_auth")
    if gate is None and isinstance(settings, dict):
        gate = settings.get("requires_auth")
    module.requires_auth = gate is True
    module.settings = settings
    module.payload = {
        k: v for k, v in record.items()
        if k not in MODULE_COLUMNS and k != "id"
    }
    return module


def create_page(*, data: Dict[str, Any]) -> Page:
    """
    Create a page together with its module records.

    Edge cases handled:
    - Missing required fields
    - Unknown status
    - Layout overrides that are not an object
    - Duplicate slug
    - Invariant violations (published pages must only hold renderable modules)
    """

    title: str | None = data.get("title")
    slug: str | None = data.get("slug")
    status: str = data.get("status", "draft")
    layout = data.get("layout")
    records = data.get("modules") or []

    if not title or not slug:
        raise ValueError("Both title and slug are required")

    if status not in PAGE_STATUSES:
        raise ValueError(f"Status must be one of {PAGE_STATUSES}")

    if layout is not None and not isinstance(layout, dict):
        raise ValueError("layout must be an object mapping section names to layouts")

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError("modules must be a list of objects")

    page = Page()
    page.title = title
    page.slug = slug
    page.status = status
    page.layout = layout or {}
    page.modules = [build_module(r, i) for i, r in enumerate(records, start=1)]

    # Checked before the flush so a bad record never reaches the column constraints
    assert_page(page, publish=status == "published")

    try:
        with transactional("page.create") as session:
            session.add(page)
            session.flush()  # ensures page.id is available

        current_app.logger.info(
            "page.create slug=%s status=%s modules=%d", page.slug, page.status, len(page.modules)
        )
        return page

    except IntegrityError as exc:
        if "slug" not in str(exc.orig):
            raise
        raise ValueError("A page with this slug already exists") from exc
