"""Shared pytest fixtures for the theme wizard test suite.

Provides reusable fixtures for:
- Default and fully-filled wizard answers
- A Rich console that records output instead of writing to the terminal
- Mocked ``httpx.AsyncClient`` for the version check
- Temporary VERSION files and output directories
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from theme_wizard.config import Config
from theme_wizard.models import WizardData


# ---------------------------------------------------------------------------
# Wizard answers
# ---------------------------------------------------------------------------

@pytest.fixture
def default_data() -> WizardData:
    """Form state exactly as the wizard starts."""
    return WizardData()


@pytest.fixture
def full_data() -> WizardData:
    """Every step filled in by hand, no AI delegation."""
    return WizardData(
        repo_url="https://github.com/joao/blog-joao",
        branch="main",
        brand_name="João Silva",
        niche="financas",
        slogan="Dinheiro sem mistério",
        slogan_ai=False,
        business_name="João Silva Consultoria",
        business_type="local",
        address_street="Rua das Flores",
        address_number="123",
        address_complement="Sala 4",
        address_city="São Paulo",
        address_state="SP",
        address_zip="01000-000",
        phone="(11) 99999-0000",
        email="contato@joao.com",
        canonical_url="https://joao.com",
        social_instagram="joaosilva",
        social_youtube="https://youtube.com/@joao",
        title_separator="—",
        og_title="Finanças com João",
        og_title_ai=False,
        og_description="Aprenda a investir do zero.",
        og_description_ai=False,
        og_image="https://joao.com/og.png",
        twitter_handle="@joao",
        gsc_code="abc123",
        about_text="Sou João, educador financeiro.",
        about_ai=False,
        author_bio="Educador financeiro há 10 anos.",
        contact_page_type="nap-only",
        visual_style="elegant",
        color_mode="light",
        font_style="serif",
        primary_color="#3b82f6",
        secondary_color="#f59e0b",
        blog_style="magazine",
        post_sidebar=False,
        home_sections=("faq", "hero", "about-bio"),
    )


@pytest.fixture
def answers_json(full_data: WizardData, tmp_path: Path) -> Path:
    """The filled answers saved with camelCase keys, like the admin panel exports them."""
    path = tmp_path / "answers.json"
    path.write_text(full_data.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Console & config
# ---------------------------------------------------------------------------

@pytest.fixture
def record_console() -> Console:
    """A non-terminal console whose output can be read back with ``export_text``."""
    return Console(file=io.StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config pointing at a temp VERSION file and output directory."""
    return Config(
        version_file=tmp_path / "VERSION",
        output_dir=tmp_path / "output",
    )


@pytest.fixture
def version_file(config: Config) -> Path:
    config.version_file.write_text("1.2.0\n", encoding="utf-8")
    return config.version_file


# ---------------------------------------------------------------------------
# Mock httpx
# ---------------------------------------------------------------------------

def make_async_client(
    *,
    text: str = "",
    status_code: int = 200,
    side_effect: Exception | None = None,
) -> AsyncMock:
    """Build an ``httpx.AsyncClient`` stand-in usable as an async context manager."""
    mock_response = MagicMock()
    mock_response.text = text
    mock_response.status_code = status_code
    mock_response.is_success = 200 <= status_code < 300

    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.get = AsyncMock(side_effect=side_effect)
    else:
        mock_client.get = AsyncMock(return_value=mock_response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def mock_async_client():
    """Factory fixture returning ``make_async_client``.

    Usage::

        def test_something(mock_async_client):
            client = mock_async_client(text="1.3.0")
            with patch("httpx.AsyncClient", return_value=client):
                ...
    """
    def factory(**kwargs: Any) -> AsyncMock:
        return make_async_client(**kwargs)

    return factory
