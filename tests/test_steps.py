"""Unit tests for the terminal step forms (theme_wizard.steps).

Every prompt reads from a scripted ``io.StringIO`` stream, one answer per
line, so each test spells out the full conversation.

Tests cover:
- parse_section_list
- Each step form returning only its own fields
- Brand step slug handling and the custom niche follow-up
- choose_site_type
- show_result copy / save / restart actions
- run_interactive: full session, locked type, validation retry, back
"""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from theme_wizard.config import Config
from theme_wizard.controller import Stage, WizardController
from theme_wizard.models import (
    BlogStyle,
    BusinessType,
    ColorMode,
    ContactPageType,
    FontStyle,
    TitleSeparator,
    VisualStyle,
    WizardData,
)
from theme_wizard.prompt_gen import generate_prompt
from theme_wizard.steps import (
    STEP_FORMS,
    ask_brand,
    ask_content,
    ask_design,
    ask_nap,
    ask_repo,
    ask_seo,
    choose_site_type,
    parse_section_list,
    run_interactive,
    show_result,
)


def script(*lines: str) -> io.StringIO:
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


REPO_ANSWERS = ("https://github.com/joao/blog", "main")
BRAND_ANSWERS = ("João Silva", "financas", "joao-silva", "y")
NAP_ANSWERS = ("person",) + ("",) * 10 + ("",) * 6
SEO_ANSWERS = ("|", "y", "y", "", "", "", "y", "y", "y")
CONTENT_ANSWERS = ("y", "y", "with-form")
DESIGN_ANSWERS = (
    "minimal", "dark", "sans", "#a855f7", "#06b6d4", "grid", "y", "hero, featured-posts",
)


# ---------------------------------------------------------------------------
# parse_section_list
# ---------------------------------------------------------------------------


class TestParseSectionList:
    @pytest.mark.unit
    def test_order_kept(self):
        assert parse_section_list("faq, hero,about-bio") == ("faq", "hero", "about-bio")

    @pytest.mark.unit
    def test_duplicates_and_blanks_dropped(self):
        assert parse_section_list("hero,, hero ,faq,") == ("hero", "faq")

    @pytest.mark.unit
    def test_empty(self):
        assert parse_section_list("  ") == ()


# ---------------------------------------------------------------------------
# Step forms
# ---------------------------------------------------------------------------


class TestStepForms:
    @pytest.mark.unit
    def test_forms_registered(self):
        assert sorted(STEP_FORMS) == [1, 2, 3, 4, 5, 6]

    @pytest.mark.unit
    def test_ask_repo(self, quiet_console):
        update = ask_repo(WizardData(), quiet_console, script("https://github.com/a/b ", "develop"))
        assert update.repo_url == "https://github.com/a/b"
        assert update.branch == "develop"

    @pytest.mark.unit
    def test_ask_repo_blank_branch(self, quiet_console):
        update = ask_repo(WizardData(), quiet_console, script("https://github.com/a/b", ""))
        assert update.branch == "main"

    @pytest.mark.unit
    def test_ask_brand_auto_slug(self, quiet_console):
        update = ask_brand(WizardData(), quiet_console, script(*BRAND_ANSWERS))
        assert update.brand_name == "João Silva"
        assert update.niche == "financas"
        assert update.slogan_ai is True
        assert update.theme_slug == "joao-silva"
        assert "slogan" not in update.model_fields_set

    @pytest.mark.unit
    def test_ask_brand_custom_slug_and_slogan(self, quiet_console):
        stream = script("João Silva", "outro", "Astronomia", "meu-tema", "n", "Olhe para cima")
        update = ask_brand(WizardData(), quiet_console, stream)
        assert update.custom_niche == "Astronomia"
        assert update.theme_slug == "meu-tema"
        assert update.slogan_ai is False
        assert update.slogan == "Olhe para cima"

    @pytest.mark.unit
    def test_ask_brand_can_return_to_derived_slug(self, quiet_console):
        ctrl = WizardController()
        ctrl.select_type("blog")
        ctrl.update(ask_brand(ctrl.data, quiet_console, script("Foo", "financas", "bar", "y")))
        assert ctrl.data.resolved_slug == "bar"
        ctrl.update(ask_brand(ctrl.data, quiet_console, script("Baz", "financas", "baz", "y")))
        assert ctrl.data.resolved_slug == "baz"
        ctrl.update(ask_brand(ctrl.data, quiet_console, script("Qux", "financas", "qux", "y")))
        assert ctrl.data.resolved_slug == "qux"

    @pytest.mark.unit
    def test_ask_brand_blank_slug_derives_from_brand(self, quiet_console):
        data = WizardData(brand_name="Foo", theme_slug="bar")
        update = ask_brand(data, quiet_console, script("Baz", "financas", "", "y"))
        assert update.theme_slug == "baz"

    @pytest.mark.unit
    def test_ask_brand_invalid_niche_reprompts(self, quiet_console):
        stream = script("Marca", "culinaria", "gastronomia", "marca", "y")
        update = ask_brand(WizardData(), quiet_console, stream)
        assert update.niche == "gastronomia"

    @pytest.mark.unit
    def test_ask_nap(self, quiet_console):
        stream = script(
            "local", "Padaria Central", "Rua A", "10", "", "50000-000", "Recife", "PE",
            "(81) 3333-0000", "oi@padaria.com", "https://padaria.com",
            "padaria", "", "", "", "", "padaria_x",
        )
        update = ask_nap(WizardData(), quiet_console, stream)
        assert update.business_type == BusinessType.LOCAL
        assert update.business_name == "Padaria Central"
        assert update.address_zip == "50000-000"
        assert update.address_city == "Recife"
        assert update.canonical_url == "https://padaria.com"
        assert update.social_instagram == "padaria"
        assert update.social_twitter == "padaria_x"
        assert update.social_youtube == ""

    @pytest.mark.unit
    def test_ask_seo_manual(self, quiet_console):
        stream = script(
            "—", "n", "Meu título", "n", "Minha descrição",
            "https://x.com/og.png", "@marca", "gsc", "n", "y", "n",
        )
        update = ask_seo(WizardData(), quiet_console, stream)
        assert update.title_separator == TitleSeparator.EM_DASH
        assert update.og_title_ai is False
        assert update.og_title == "Meu título"
        assert update.og_description == "Minha descrição"
        assert update.generate_sitemap is False
        assert update.generate_robots is True
        assert update.generate_schema is False

    @pytest.mark.unit
    def test_ask_seo_delegated(self, quiet_console):
        update = ask_seo(WizardData(), quiet_console, script(*SEO_ANSWERS))
        assert update.og_title_ai is True
        assert "og_title" not in update.model_fields_set

    @pytest.mark.unit
    def test_ask_content(self, quiet_console):
        stream = script("n", "Sobre mim", "n", "Bio curta", "nap-only")
        update = ask_content(WizardData(), quiet_console, stream)
        assert update.about_ai is False
        assert update.about_text == "Sobre mim"
        assert update.author_bio_same_as_about is False
        assert update.author_bio == "Bio curta"
        assert update.contact_page_type == ContactPageType.NAP_ONLY

    @pytest.mark.unit
    def test_ask_content_bio_from_about(self, quiet_console):
        update = ask_content(WizardData(), quiet_console, script("y", "y", "none"))
        assert update.author_bio_same_as_about is True
        assert "author_bio" not in update.model_fields_set
        assert update.contact_page_type == ContactPageType.NONE

    @pytest.mark.unit
    def test_ask_design(self, quiet_console):
        stream = script(
            "elegant", "light", "serif", "#3b82f6", "#f59e0b", "magazine", "n", "faq, hero",
        )
        update = ask_design(WizardData(), quiet_console, stream)
        assert update.visual_style == VisualStyle.ELEGANT
        assert update.color_mode == ColorMode.LIGHT
        assert update.font_style == FontStyle.SERIF
        assert update.primary_color == "#3b82f6"
        assert update.blog_style == BlogStyle.MAGAZINE
        assert update.post_sidebar is False
        assert update.home_sections == ("faq", "hero")


# ---------------------------------------------------------------------------
# Type selection & result
# ---------------------------------------------------------------------------


class TestChooseSiteType:
    @pytest.mark.unit
    def test_choice(self, quiet_console):
        assert choose_site_type(quiet_console, script("blog")) == "blog"

    @pytest.mark.unit
    def test_quit(self, quiet_console):
        assert choose_site_type(quiet_console, script("q")) == "q"

    @pytest.mark.unit
    def test_locked_listed(self, quiet_console):
        choose_site_type(quiet_console, script("q"))
        assert "Em breve" in quiet_console.file.getvalue()


class TestShowResult:
    @pytest.fixture
    def finished(self) -> WizardController:
        ctrl = WizardController()
        ctrl.stage = Stage.PROMPT_RESULT
        ctrl.data = WizardData(brand_name="João Silva")
        ctrl.prompt = generate_prompt(ctrl.data)
        return ctrl

    @pytest.mark.unit
    def test_copy_then_quit(self, finished, quiet_console):
        clipboard = MagicMock()
        clipboard.copied = True
        generator = MagicMock()
        action = show_result(finished, clipboard, generator, quiet_console, script("c", "q"))
        assert action == "q"
        clipboard.copy.assert_called_once_with(finished.prompt)
        assert "Copiado" in quiet_console.file.getvalue()
        generator.save_prompt.assert_not_called()

    @pytest.mark.unit
    def test_save_then_restart(self, finished, quiet_console):
        clipboard = MagicMock()
        generator = MagicMock()
        action = show_result(finished, clipboard, generator, quiet_console, script("s", "r"))
        assert action == "r"
        generator.save_prompt.assert_called_once_with(finished.prompt, "joao-silva")

    @pytest.mark.unit
    def test_preview_shows_prompt(self, finished, quiet_console):
        show_result(finished, MagicMock(), MagicMock(), quiet_console, script("q"))
        out = quiet_console.file.getvalue()
        assert "Prompt gerado com sucesso" in out
        assert "/blog/[slug]" in out


# ---------------------------------------------------------------------------
# run_interactive
# ---------------------------------------------------------------------------


class TestRunInteractive:
    @pytest.mark.unit
    def test_full_session_saves_prompt(self, tmp_path, quiet_console):
        stream = script(
            "blog",
            *REPO_ANSWERS, "n",
            *BRAND_ANSWERS, "n",
            *NAP_ANSWERS, "n",
            *SEO_ANSWERS, "n",
            *CONTENT_ANSWERS, "n",
            *DESIGN_ANSWERS, "n",
            "s", "q",
        )
        config = Config(output_dir=tmp_path)
        ctrl = run_interactive(config=config, console=quiet_console, stream=stream)
        assert ctrl.stage == Stage.PROMPT_RESULT
        saved = tmp_path / "prompts" / "theme-joao-silva.md"
        assert saved.read_text(encoding="utf-8") == ctrl.prompt
        assert "src/themes/joao-silva/" in ctrl.prompt

    @pytest.mark.unit
    def test_quit_immediately(self, quiet_console):
        ctrl = run_interactive(console=quiet_console, stream=script("q"))
        assert ctrl.stage == Stage.TYPE_SELECT

    @pytest.mark.unit
    def test_locked_type_message(self, quiet_console):
        ctrl = run_interactive(console=quiet_console, stream=script("portfolio", "q"))
        assert ctrl.stage == Stage.TYPE_SELECT
        assert "disponível em breve" in quiet_console.file.getvalue()

    @pytest.mark.unit
    def test_validation_error_repeats_step(self, quiet_console):
        stream = script(
            "blog",
            "", "main", "n",
            *REPO_ANSWERS, "n",
            *BRAND_ANSWERS, "b",
            *REPO_ANSWERS, "b",
            "q",
        )
        ctrl = WizardController()
        run_interactive(console=quiet_console, stream=stream, controller=ctrl)
        out = quiet_console.file.getvalue()
        assert "Informe a URL do repositório GitHub." in out
        assert ctrl.stage == Stage.TYPE_SELECT
        assert ctrl.data.repo_url == "https://github.com/joao/blog"

    @pytest.mark.unit
    def test_invalid_color_reported(self, quiet_console):
        ctrl = WizardController()
        ctrl.select_type("blog")
        ctrl.step = 6
        stream = script(
            "minimal", "dark", "sans", "roxo", "#06b6d4", "grid", "y", "hero",
            "minimal", "dark", "sans", "#a855f7", "#06b6d4", "grid", "y", "hero", "b",
            *CONTENT_ANSWERS, "b",
            *SEO_ANSWERS, "b",
            *NAP_ANSWERS, "b",
            *BRAND_ANSWERS, "b",
            *REPO_ANSWERS, "b",
            "q",
        )
        run_interactive(console=quiet_console, stream=stream, controller=ctrl)
        assert "Valor inválido" in quiet_console.file.getvalue()
        assert ctrl.stage == Stage.TYPE_SELECT

    @pytest.mark.unit
    def test_edit_stays_on_step(self, quiet_console):
        ctrl = WizardController()
        stream = script(
            "blog",
            "https://github.com/a/old", "main", "e",
            "https://github.com/a/new", "main", "b",
            "q",
        )
        run_interactive(console=quiet_console, stream=stream, controller=ctrl)
        assert ctrl.data.repo_url == "https://github.com/a/new"
