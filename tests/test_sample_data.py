"""Smoke tests against the datasets shipped in data/."""

from __future__ import annotations

from uiux_kit.config import DEFAULT_DATA_DIR, Category
from uiux_kit.kit import generate_ui_kit
from uiux_kit.knowledge_base import create_knowledge_base


def test_shipped_datasets_load():
    kb = create_knowledge_base(DEFAULT_DATA_DIR)
    for category in Category:
        assert kb.records(category), category


def test_shipped_datasets_recommend_react_dashboard():
    kb = create_knowledge_base(DEFAULT_DATA_DIR)
    kit = generate_ui_kit("SaaS dashboard with React", kb=kb)
    assert kit.charts
    assert kit.tech_stack["stack_name"] == "Next.js Fullstack"
    assert kit.ui_style is not None
