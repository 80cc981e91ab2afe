from __future__ import annotations
"""
Configuration for the UI/UX kit recommender.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

# Paths
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"
DATA_DIR = Path(os.getenv("UIUX_KIT_DATA_DIR", str(DEFAULT_DATA_DIR)))

DATA_ENCODING = "utf-8"


class Category(str, Enum):
    """The fixed set of design-asset datasets, in load/index order."""

    UI_STYLES = "ui_styles"
    COLOR_PALETTES = "color_palettes"
    PRODUCTS = "products"
    FONT_PAIRINGS = "font_pairings"
    CHART_TYPES = "chart_types"
    BUTTON_STYLES = "button_styles"
    CTA_COMPONENTS = "cta_components"
    TECH_STACKS = "tech_stacks"
    ANIMATIONS = "animations"
    ICON_STYLES = "icon_styles"
    LAYOUT_TEMPLATES = "layout_templates"


CATEGORY_FILES: Dict[Category, str] = {cat: f"{cat.value}.csv" for cat in Category}

# BM25+ parameters (idf is log((N+1)/n), never negative)
BM25_K1 = 1.5
BM25_B = 0.75
BM25_DELTA = 1.0

# Result policy
SEARCH_DEFAULT_LIMIT = 5
DEFAULT_KIT_TOP_K = 3


def kit_top_k_from_env(value: Optional[str]) -> int:
    """Kit list fields hold 3 entries.  An override departs from that and is clamped to >= 1."""
    if value is None or not value.strip():
        return DEFAULT_KIT_TOP_K
    return max(1, int(value))


KIT_TOP_K = kit_top_k_from_env(os.getenv("UIUX_KIT_TOP_K"))

# Text processing
MAX_QUERY_CHARS = 2_000


# Category participation rules.  Keyword hits are substring matches on the
# lower-cased query.  ``default_on`` categories are requested for every query.
@dataclass(frozen=True)
class CategoryRule:
    default_on: bool
    keywords: Tuple[str, ...] = ()


CATEGORY_RULES: Dict[Category, CategoryRule] = {
    Category.UI_STYLES: CategoryRule(default_on=True),
    Category.COLOR_PALETTES: CategoryRule(
        default_on=True, keywords=("color", "màu", "palette", "theme")
    ),
    Category.PRODUCTS: CategoryRule(
        default_on=True,
        keywords=("landing", "saas", "crm", "app", "product", "education", "school", "course"),
    ),
    Category.FONT_PAIRINGS: CategoryRule(
        default_on=True, keywords=("font", "typography", "type")
    ),
    Category.CHART_TYPES: CategoryRule(
        default_on=False, keywords=("chart", "metric", "dashboard", "analytics")
    ),
    Category.BUTTON_STYLES: CategoryRule(
        default_on=True, keywords=("button", "cta", "call to action")
    ),
    Category.CTA_COMPONENTS: CategoryRule(default_on=True),
    Category.TECH_STACKS: CategoryRule(
        default_on=True,
        keywords=("stack", "tech", "frontend", "backend", "react", "reactjs", "next"),
    ),
    Category.ANIMATIONS: CategoryRule(
        default_on=False, keywords=("animation", "motion", "transition")
    ),
    Category.ICON_STYLES: CategoryRule(default_on=False, keywords=("icon", "icons")),
    Category.LAYOUT_TEMPLATES: CategoryRule(
        default_on=True, keywords=("layout", "grid", "section", "template", "cta")
    ),
}

# Tech stack preference
REACT_KEYWORDS: List[str] = ["react", "reactjs"]
NEXT_KEYWORDS: List[str] = ["next.js", "nextjs"]
TECH_PRIORITY_FIELD = "technologies"
REACT_PRIORITY = 2
NEXT_PRIORITY = 1

# CLI rendering: section title and the columns summarised per item
CATEGORY_DISPLAY: Dict[Category, Tuple[str, List[str]]] = {
    Category.UI_STYLES: ("UI Styles", ["style_name", "description"]),
    Category.COLOR_PALETTES: ("Color Palettes", ["palette_name", "mood"]),
    Category.PRODUCTS: (
        "Products",
        ["product_name", "category", "target_audience", "typical_style"],
    ),
    Category.FONT_PAIRINGS: ("Font Pairings", ["pairing_name", "heading_font", "body_font"]),
    Category.CHART_TYPES: ("Chart Types", ["chart_type", "best_for"]),
    Category.BUTTON_STYLES: ("Button Styles", ["name", "description"]),
    Category.CTA_COMPONENTS: ("CTA Components", ["cta_name", "cta_type", "description"]),
    Category.TECH_STACKS: ("Tech Stacks", ["stack_name", "technologies", "best_for"]),
    Category.ANIMATIONS: ("Animations", ["name", "type", "description"]),
    Category.ICON_STYLES: ("Icon Styles", ["name", "style", "description"]),
    Category.LAYOUT_TEMPLATES: ("Layout Templates", ["name", "description"]),
}

# Record = one CSV row, column -> value
Record = Dict[str, str]

# Kit fields fed by opt-in categories; omitted from output when not requested
OPT_IN_KIT_FIELDS: Tuple[str, ...] = ("charts", "animations", "icons")


# Pydantic schemas
class RecommendationKit(BaseModel):
    query: str
    product: Optional[Record] = None
    ui_style: Optional[Record] = None
    color_palette: Optional[Record] = None
    font_pairing: Optional[Record] = None
    layout_template: Optional[Record] = None
    buttons: List[Record] = Field(default_factory=list)
    ctas: List[Record] = Field(default_factory=list)
    charts: Optional[List[Record]] = None
    animations: Optional[List[Record]] = None
    icons: Optional[List[Record]] = None
    tech_stack: Optional[Record] = None

    def to_dict(self) -> Dict[str, object]:
        data = self.model_dump()
        for key in OPT_IN_KIT_FIELDS:
            if data.get(key) is None:
                data.pop(key, None)
        return data


class RecommendRequest(BaseModel):
    query: str = Field(..., min_length=1)


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    categories: Optional[List[Category]] = None
    limit: int = Field(SEARCH_DEFAULT_LIMIT, ge=1, le=100)


class SearchHitItem(BaseModel):
    doc_id: int
    score: float
    category: Category
    record: Record


class SearchResponse(BaseModel):
    hits: List[SearchHitItem]


class CategoriesResponse(BaseModel):
    records: Dict[str, int]
    documents: int


class HealthResponse(BaseModel):
    status: str
