# modular_pages/domain/modules/layout.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .types import PLACEMENTS, Placement

logger = logging.getLogger(__name__)

# Relative proportions, not styling
DEFAULT_SECTION_LAYOUTS: Dict[str, str] = {
    Placement.HEADER.value: "full",
    Placement.MAIN.value: "fill",
    Placement.SIDEBAR.value: "1/4",
    Placement.FOOTER.value: "full",
    Placement.OTHER.value: "full",
}

# Wrapping element per bucket
SECTION_ELEMENTS: Dict[str, str] = {
    Placement.HEADER.value: "header",
    Placement.MAIN.value: "main",
    Placement.SIDEBAR.value: "aside",
    Placement.FOOTER.value: "footer",
    Placement.OTHER.value: "div",
}


@dataclass(frozen=True)
class Region:
    section: str
    element: str
    layout: Any
    modules: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section": self.section,
            "element": self.element,
            "layout": self.layout,
            "modules": list(self.modules),
        }


@dataclass(frozen=True)
class PageSkeleton:
    """
    Composed page: header, a body row (main + sidebar), footer, other.

    Regions for empty buckets are None and never serialized.
    """
    layouts: Dict[str, Any]
    header: Optional[Region] = None
    main: Optional[Region] = None
    sidebar: Optional[Region] = None
    footer: Optional[Region] = None
    other: Optional[Region] = None

    @property
    def body(self) -> List[Region]:
        return [r for r in (self.main, self.sidebar) if r is not None]

    @property
    def regions(self) -> List[Region]:
        """Non-empty regions in presentation order."""
        ordered = [self.header, self.main, self.sidebar, self.footer, self.other]
        return [r for r in ordered if r is not None]

    @property
    def is_empty(self) -> bool:
        return not self.regions

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "regions": [r.to_dict() for r in self.regions],
            "is_empty": self.is_empty,
        }
        if self.body:
            data["body"] = [r.section for r in self.body]
        return data


def merge_layouts(layout_overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Defaults merged with caller overrides.

    A recognized key replaces its default wholesale; unknown bucket names
    are ignored, as are overrides that are not a mapping.
    """
    layouts = dict(DEFAULT_SECTION_LAYOUTS)

    if layout_overrides is not None and not isinstance(layout_overrides, Mapping):
        logger.warning("Ignoring layout overrides of type %s", type(layout_overrides).__name__)
        return layouts

    for name, value in (layout_overrides or {}).items():
        if name not in layouts:
            logger.debug("Ignoring layout override for unknown section %r", name)
            continue
        layouts[name] = value

    return layouts


def compose(
    buckets: Mapping[str, List[Any]],
    layout_overrides: Optional[Mapping[str, Any]] = None,
    *,
    render: Optional[Callable[[Any], Optional[Any]]] = None,
) -> PageSkeleton:
    """
    Arrange grouped modules into a page skeleton.

    When ``render`` is given each module is passed through it and None
    results are dropped before the emptiness check, so a bucket whose
    modules all render to nothing still gets no wrapper.
    """
    layouts = merge_layouts(layout_overrides)
    regions: Dict[str, Optional[Region]] = {}

    for name in PLACEMENTS:
        modules = list(buckets.get(name) or [])

        if render is not None:
            modules = [out for out in (render(m) for m in modules) if out is not None]

        if not modules:
            regions[name] = None
            continue

        regions[name] = Region(
            section=name,
            element=SECTION_ELEMENTS[name],
            layout=layouts[name],
            modules=modules,
        )

    return PageSkeleton(layouts=layouts, **regions)
