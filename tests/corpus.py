"""Small in-memory dataset shared by the test suite."""

from __future__ import annotations

from typing import Dict, List

from uiux_kit.config import Category


CORPUS: Dict[Category, List[Dict[str, str]]] = {
    Category.UI_STYLES: [
        {"style_name": "Minimalism", "description": "whitespace and restraint"},
        {"style_name": "Glassmorphism", "description": "frosted translucent panels"},
        {"style_name": "Brutalism", "description": "raw heavy type"},
        {"style_name": "Claymorphism", "description": "inflated pastel shapes"},
    ],
    Category.COLOR_PALETTES: [
        {"palette_name": "Ocean Trust", "mood": "calm professional"},
        {"palette_name": "Midnight Neon", "mood": "energetic dark"},
        {"palette_name": "Sunset Warmth", "mood": "friendly warm"},
    ],
    Category.PRODUCTS: [
        {"product_name": "CRM Workspace", "category": "B2B", "target_audience": "sales teams", "typical_style": "Minimalism"},
        {"product_name": "SaaS Analytics Platform", "category": "B2B", "target_audience": "growth teams", "typical_style": "Dark"},
        {"product_name": "Online Course", "category": "Education", "target_audience": "students", "typical_style": "Playful"},
    ],
    Category.FONT_PAIRINGS: [
        {"pairing_name": "Modern Tech", "heading_font": "Inter", "body_font": "Inter"},
        {"pairing_name": "Editorial", "heading_font": "Playfair Display", "body_font": "Source Serif"},
    ],
    Category.CHART_TYPES: [
        {"chart_type": "Line Chart", "best_for": "trends over time"},
        {"chart_type": "Bar Chart", "best_for": "comparisons across groups"},
        {"chart_type": "Donut Chart", "best_for": "share of a whole"},
        {"chart_type": "Heatmap", "best_for": "activity density"},
    ],
    Category.BUTTON_STYLES: [
        {"name": "Solid Primary", "description": "filled brand color"},
        {"name": "Ghost", "description": "transparent with border"},
        {"name": "Pill", "description": "fully rounded gradient"},
        {"name": "Icon Only", "description": "square toolbar control"},
    ],
    Category.CTA_COMPONENTS: [
        {"cta_name": "Hero Signup", "cta_type": "Primary", "description": "email capture"},
        {"cta_name": "Free Trial Banner", "cta_type": "Conversion", "description": "full width promo"},
    ],
    Category.TECH_STACKS: [
        {"stack_name": "Vue Nuxt", "technologies": "Vue + Nuxt", "best_for": "content sites"},
        {"stack_name": "React SPA", "technologies": "React, Tailwind", "best_for": "single page apps"},
        {"stack_name": "Next.js Fullstack", "technologies": "Next.js + React + Tailwind", "best_for": "products with auth"},
        {"stack_name": "Next Only", "technologies": "Next.js + Vanilla CSS", "best_for": "static marketing"},
    ],
    Category.ANIMATIONS: [
        {"name": "Fade Up", "type": "Entrance", "description": "fade while rising"},
        {"name": "Hover Lift", "type": "Micro", "description": "card rises on hover"},
    ],
    Category.ICON_STYLES: [
        {"name": "Lucide", "style": "Outline", "description": "consistent stroke"},
        {"name": "Heroicons", "style": "Solid", "description": "filled controls"},
    ],
    Category.LAYOUT_TEMPLATES: [
        {"name": "Classic Landing", "description": "hero features pricing footer"},
        {"name": "Sidebar Dashboard", "description": "left navigation and card grid"},
    ],
}
