# modular_pages/application/pages/render_page.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from modular_pages.domain.auth_state import AuthState
from modular_pages.domain.modules.dispatch import RenderConfig, render_module
from modular_pages.domain.modules.layout import compose
from modular_pages.domain.modules.sections import group_modules_by_section
from modular_pages.normalizers.page import normalize_skeleton


def render_page(
    records: Optional[Iterable[Any]],
    layout_overrides: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[RenderConfig] = None,
    auth_state: AuthState = AuthState.ANONYMOUS,
) -> Dict[str, Any]:
    """
    Turns an already-fetched module list into a rendered page skeleton.

    Responsibilities:
    - grouping by placement (stable)
    - layout composition with caller overrides
    - per-module dispatch, skipping invalid or gated modules

    Never raises for malformed module input.
    """
    config = config or RenderConfig()

    buckets = group_modules_by_section(records)

    skeleton = compose(
        buckets,
        layout_overrides,
        render=lambda module: render_module(module, config=config, auth_state=auth_state),
    )

    return normalize_skeleton(skeleton)
