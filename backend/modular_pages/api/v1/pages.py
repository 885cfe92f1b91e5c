# modular_pages/api/v1/pages.py
from collections.abc import Mapping
from flask import current_app, g, request, jsonify
from flask_jwt_extended import jwt_required
from modular_pages.utils.decorators import roles_required
from modular_pages.models.page import Page
from modular_pages.application.pages.create_page import create_page as create_page_use_case
from modular_pages.application.pages.render_page import render_page
from modular_pages.domain.auth_state import AuthState
from modular_pages.domain.modules.dispatch import RenderConfig
from modular_pages.normalizers.page import normalize_page
from . import v1_bp


def _layout_overrides(page):
    layouts = {}
    for overrides in (current_app.config.get("SECTION_LAYOUTS"), page.layout):
        if isinstance(overrides, Mapping):
            layouts.update(overrides)
        elif overrides:
            current_app.logger.warning(
                "layout overrides ignored slug=%s type=%s", page.slug, type(overrides).__name__
            )
    return layouts


# ------------------------
# Public rendering
# ------------------------

@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    page = Page.query.filter_by(
        slug=slug,
        status="published"
    ).first_or_404()

    rendered = render_page(
        [m.to_record() for m in page.modules],
        _layout_overrides(page),
        config=RenderConfig.from_app_config(current_app.config),
        auth_state=g.get("auth_state", AuthState.PENDING),
    )

    return jsonify(normalize_page(page, rendered))


# ------------------------
# Admin
# ------------------------

@v1_bp.route("/pages/id/<page_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_page_by_id(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()

    return jsonify(normalize_page(page, admin=True))


@v1_bp.route("/pages", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_page():
    data = request.get_json(silent=True) or {}

    if data.get("slug") and Page.query.filter_by(slug=data["slug"]).first():
        return jsonify({"error": "Slug already exists"}), 409

    try:
        page = create_page_use_case(data=data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({
        "id": page.id,
        "message": "Page created successfully"
    }), 201
