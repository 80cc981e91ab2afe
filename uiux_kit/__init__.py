"""
Top-level package for the UI/UX kit recommender.

This package loads categorized design datasets (styles, palettes, font
pairings, layouts, tech stacks, ...), builds a BM25 index over every
row, and composes a multi-category "kit" recommendation for a free-text
query.  There are no side-effects on import: knowledge bases are built
explicitly through :func:`uiux_kit.knowledge_base.create_knowledge_base`.
"""
from __future__ import annotations
