# modular_pages/domain/modules/types.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict, Union


class ModuleVariant(str, Enum):
    """
    Closed set of module variants known at build time.

    INVALID is the single outcome for anything that is not a valid
    instance of a known variant (unknown tag or failed payload check).
    """
    HERO = "hero"
    CTA = "cta"
    SELLING_POINTS = "selling-points"
    TESTIMONIALS = "testimonials"
    FEATURED_POSTS = "featured-posts"
    STATS = "stats"
    GALLERY = "gallery"
    TEXT = "text"
    FORM = "form"
    ACCORDION = "accordion"
    TABS = "tabs"
    VIDEO = "video"
    CHART = "chart"

    INVALID = "invalid"


KNOWN_VARIANTS = frozenset(v for v in ModuleVariant if v is not ModuleVariant.INVALID)

# Legacy / alternate tags the CMS still sends
VARIANT_ALIASES: Dict[str, ModuleVariant] = {
    "selling_points": ModuleVariant.SELLING_POINTS,
    "faq": ModuleVariant.ACCORDION,
    "tabbed-content": ModuleVariant.TABS,
}


class Placement(str, Enum):
    HEADER = "header"
    MAIN = "main"
    SIDEBAR = "sidebar"
    FOOTER = "footer"
    OTHER = "other"


# Bucket order used everywhere a full bucket mapping is built
PLACEMENTS: List[str] = [p.value for p in Placement]

DEFAULT_PLACEMENT = Placement.MAIN


# -------------------------------------------------
# Variant shapes
# -------------------------------------------------

class Button(TypedDict, total=False):
    text: str
    url: str
    style: str
    new_tab: bool


class _ModuleBase(TypedDict):
    id: Union[int, str]
    type: str


class BaseModule(_ModuleBase, total=False):
    title: str
    content: str
    template: str
    order: int
    placement: str
    requires_auth: bool
    buttons: List[Button]
    settings: Dict[str, Any]


class HeroModule(BaseModule, total=False):
    intro: str
    description: str
    image: Union[str, List[str]]
    video_url: str
    overlay_opacity: float
    text_color: str
    height: str
    alignment: str


class CTAModule(BaseModule, total=False):
    description: str
    background_color: str
    text_color: str
    alignment: str
    image: str


class SellingPoint(TypedDict, total=False):
    id: int
    title: str
    content: str
    description: str
    icon: str


class SellingPointsModule(BaseModule, total=False):
    points: List[SellingPoint]
    layout: str
    columns: int


class Testimonial(TypedDict, total=False):
    id: int
    content: str
    author_name: str
    author_position: str
    author_image: str


class TestimonialsModule(BaseModule, total=False):
    testimonials: List[Testimonial]
    display_style: str
    display_count: int


class FeaturedPostsModule(BaseModule, total=False):
    subtitle: str
    posts: List[Dict[str, Any]]
    display_style: str
    columns: int
    show_excerpt: bool
    show_categories: bool
    show_read_more: bool


class Stat(TypedDict, total=False):
    id: int
    value: str
    label: str
    icon: str


class StatsModule(BaseModule, total=False):
    subtitle: str
    stats: List[Stat]
    background_color: str
    layout: str
    columns: int


class GalleryItem(TypedDict, total=False):
    id: int
    image: str
    title: str
    description: str


class GalleryModule(BaseModule, total=False):
    items: List[GalleryItem]
    layout: str
    columns: int
    enable_lightbox: bool


class TextModule(BaseModule, total=False):
    alignment: str
    text_size: str
    enable_columns: bool
    columns_count: int


class FormModule(BaseModule, total=False):
    form_id: int
    description: str
    success_message: str
    error_message: str
    redirect_url: str


class AccordionItem(TypedDict, total=False):
    id: int
    question: str
    answer: str
    icon: str


class AccordionModule(BaseModule, total=False):
    items: List[AccordionItem]
    allow_multiple_open: bool
    default_open_index: Optional[int]
    icon_position: str


class Tab(TypedDict, total=False):
    id: int
    title: str
    content: str
    icon: str


class TabsModule(BaseModule, total=False):
    tabs: List[Tab]
    orientation: str
    default_tab_index: int


class VideoModule(BaseModule, total=False):
    video_url: str
    video_type: str
    poster_image: str
    autoplay: bool
    loop: bool
    muted: bool
    controls: bool
    allow_fullscreen: bool


class ChartDataset(TypedDict, total=False):
    label: str
    data: List[float]
    background_color: Union[str, List[str]]
    border_color: str


class ChartData(TypedDict):
    labels: List[str]
    datasets: List[ChartDataset]


class ChartModule(BaseModule, total=False):
    chart_type: str
    data: ChartData
    options: Dict[str, Any]


Module = Union[
    HeroModule,
    CTAModule,
    SellingPointsModule,
    TestimonialsModule,
    FeaturedPostsModule,
    StatsModule,
    GalleryModule,
    TextModule,
    FormModule,
    AccordionModule,
    TabsModule,
    VideoModule,
    ChartModule,
    BaseModule,
]

VARIANT_SHAPES: Dict[ModuleVariant, type] = {
    ModuleVariant.HERO: HeroModule,
    ModuleVariant.CTA: CTAModule,
    ModuleVariant.SELLING_POINTS: SellingPointsModule,
    ModuleVariant.TESTIMONIALS: TestimonialsModule,
    ModuleVariant.FEATURED_POSTS: FeaturedPostsModule,
    ModuleVariant.STATS: StatsModule,
    ModuleVariant.GALLERY: GalleryModule,
    ModuleVariant.TEXT: TextModule,
    ModuleVariant.FORM: FormModule,
    ModuleVariant.ACCORDION: AccordionModule,
    ModuleVariant.TABS: TabsModule,
    ModuleVariant.VIDEO: VideoModule,
    ModuleVariant.CHART: ChartModule,
}
