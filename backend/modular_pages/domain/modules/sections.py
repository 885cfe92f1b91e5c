# modular_pages/domain/modules/sections.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from .classifier import module_type
from .types import DEFAULT_PLACEMENT, PLACEMENTS, Placement, VARIANT_ALIASES


def module_placement(module: Any) -> str:
    """
    Bucket name for a module.

    Reads ``placement`` first, then ``settings.section``. Missing means
    ``main``; anything present but unrecognized lands in ``other``.
    """
    if not isinstance(module, Mapping):
        return DEFAULT_PLACEMENT.value

    placement = module.get("placement")
    if placement is None:
        settings = module.get("settings")
        if isinstance(settings, Mapping):
            placement = settings.get("section")

    if placement is None or placement == "":
        return DEFAULT_PLACEMENT.value

    if placement in PLACEMENTS:
        return placement

    return Placement.OTHER.value


def group_modules_by_section(modules: Optional[Iterable[Any]]) -> Dict[str, List[Any]]:
    """
    Partition modules into placement buckets.

    - Stable: relative input order is kept inside each bucket, ``order``
      is not consulted
    - Complete: every module lands in exactly one bucket
    - Total: all five buckets are present, empty ones as []
    """
    sections: Dict[str, List[Any]] = {name: [] for name in PLACEMENTS}

    for module in modules or ():
        sections[module_placement(module)].append(module)

    return sections


def _matches(module: Any, type_: str) -> bool:
    wanted = VARIANT_ALIASES.get(type_, type_)
    variant = module_type(module)
    return variant is not None and variant == wanted


def get_module_by_type(modules: Optional[Iterable[Any]], type_: str) -> Optional[Any]:
    """First module declaring ``type_`` (aliases resolved), or None."""
    for module in modules or ():
        if _matches(module, type_):
            return module
    return None


def get_modules_by_type(modules: Optional[Iterable[Any]], type_: str) -> List[Any]:
    return [m for m in modules or () if _matches(m, type_)]
