"""Terminal screens for the theme wizard.

Each step form asks only for the fields its step owns and returns a
``WizardUpdate``; ``run_interactive`` wires the forms to a
``WizardController``. Every prompt accepts an optional ``stream`` so a whole
session can be scripted from a text buffer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from theme_wizard.catalog import (
    BLOG_STYLE_OPTIONS,
    BUSINESS_TYPE_OPTIONS,
    COLOR_PALETTE,
    CONTACT_PAGE_OPTIONS,
    CUSTOM_NICHE_ID,
    FONT_STYLE_OPTIONS,
    HOME_SECTION_OPTIONS,
    NICHE_OPTIONS,
    SITE_TYPES,
    SOCIAL_PLATFORMS,
    VISUAL_STYLE_OPTIONS,
    Option,
)
from theme_wizard.clipboard import PromptClipboard
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
    WizardUpdate,
    slugify,
)
from theme_wizard.prompt_gen import PromptGenerator
from theme_wizard.utils import print_step_header, render_step_indicator

QUIT = "q"

StepForm = Callable[..., WizardUpdate]


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def _text(label: str, default: str, console: Console, stream: TextIO | None) -> str:
    return Prompt.ask(
        label, console=console, default=default, show_default=bool(default), stream=stream
    )


def _choice(
    label: str,
    options: tuple[Option, ...],
    default: str,
    console: Console,
    stream: TextIO | None,
) -> str:
    table = Table(show_header=False, box=None, padding=(0, 1))
    for opt in options:
        table.add_row(f"[bold]{opt.id}[/bold]", f"{opt.emoji} {opt.label}".strip(), opt.description)
    console.print(table)
    choices = [opt.id for opt in options]
    if default:
        return Prompt.ask(
            label, console=console, choices=choices, default=default,
            show_choices=False, stream=stream,
        )
    return Prompt.ask(label, console=console, choices=choices, show_choices=False, stream=stream)


def _confirm(label: str, default: bool, console: Console, stream: TextIO | None) -> bool:
    return Confirm.ask(label, console=console, default=default, stream=stream)


def parse_section_list(raw: str) -> tuple[str, ...]:
    """Split a comma-separated section list, keeping first-seen order."""
    seen: list[str] = []
    for piece in raw.split(","):
        section_id = piece.strip()
        if section_id and section_id not in seen:
            seen.append(section_id)
    return tuple(seen)


# ---------------------------------------------------------------------------
# Step forms
# ---------------------------------------------------------------------------


def ask_repo(data: WizardData, console: Console, stream: TextIO | None = None) -> WizardUpdate:
    console.print("[dim]Repositório GitHub criado a partir do template CNX.[/dim]")
    return WizardUpdate(
        repo_url=_text("URL do repositório", data.repo_url, console, stream).strip(),
        branch=_text("Branch", data.branch, console, stream).strip() or "main",
    )


def ask_brand(data: WizardData, console: Console, stream: TextIO | None = None) -> WizardUpdate:
    console.print("[dim]Essas informações definem a personalidade do site gerado.[/dim]")
    brand_name = _text("Nome da marca", data.brand_name, console, stream)
    niche = _choice("Nicho", NICHE_OPTIONS, data.niche, console, stream)

    update = WizardUpdate(brand_name=brand_name, niche=niche)
    if niche == CUSTOM_NICHE_ID:
        update.custom_niche = _text("Qual nicho?", data.custom_niche, console, stream)

    derived = slugify(brand_name)
    custom = data.theme_slug if data.theme_slug != slugify(data.brand_name) else ""
    slug = _text("Slug do tema", custom or derived, console, stream).strip()
    update.theme_slug = slug or derived

    update.slogan_ai = _confirm("Deixar a IA criar o slogan?", data.slogan_ai, console, stream)
    if not update.slogan_ai:
        update.slogan = _text("Slogan", data.slogan, console, stream)
    return update


def ask_nap(data: WizardData, console: Console, stream: TextIO | None = None) -> WizardUpdate:
    update = WizardUpdate(
        business_type=BusinessType(
            _choice("Tipo de negócio", BUSINESS_TYPE_OPTIONS, data.business_type.value, console, stream)
        ),
        business_name=_text("Nome oficial", data.business_name, console, stream),
        address_street=_text("Rua", data.address_street, console, stream),
        address_number=_text("Número", data.address_number, console, stream),
        address_complement=_text("Complemento", data.address_complement, console, stream),
        address_zip=_text("CEP", data.address_zip, console, stream),
        address_city=_text("Cidade", data.address_city, console, stream),
        address_state=_text("Estado", data.address_state, console, stream),
        phone=_text("Telefone", data.phone, console, stream),
        email=_text("E-mail", data.email, console, stream),
        canonical_url=_text("URL canônica", data.canonical_url, console, stream),
    )
    handles = data.social_handles()
    for platform in SOCIAL_PLATFORMS:
        handle = _text(
            f"{platform.label} ({platform.placeholder})",
            handles[platform.field],
            console,
            stream,
        )
        setattr(update, platform.field, handle)
    return update


def ask_seo(data: WizardData, console: Console, stream: TextIO | None = None) -> WizardUpdate:
    separator = Prompt.ask(
        "Separador de título",
        console=console,
        choices=[s.value for s in TitleSeparator],
        default=data.title_separator.value,
        stream=stream,
    )
    update = WizardUpdate(title_separator=TitleSeparator(separator))

    update.og_title_ai = _confirm("Deixar a IA gerar o OG title?", data.og_title_ai, console, stream)
    if not update.og_title_ai:
        update.og_title = _text("OG title", data.og_title, console, stream)
    update.og_description_ai = _confirm(
        "Deixar a IA gerar a meta description?", data.og_description_ai, console, stream
    )
    if not update.og_description_ai:
        update.og_description = _text("OG description", data.og_description, console, stream)

    update.og_image = _text("URL da imagem OG", data.og_image, console, stream)
    update.twitter_handle = _text("Twitter handle", data.twitter_handle, console, stream)
    update.gsc_code = _text("Código de verificação do Search Console", data.gsc_code, console, stream)
    update.generate_sitemap = _confirm("Gerar sitemap.xml?", data.generate_sitemap, console, stream)
    update.generate_robots = _confirm("Gerar robots.txt?", data.generate_robots, console, stream)
    update.generate_schema = _confirm("Gerar Schema.org?", data.generate_schema, console, stream)
    return update


def ask_content(data: WizardData, console: Console, stream: TextIO | None = None) -> WizardUpdate:
    update = WizardUpdate(
        about_ai=_confirm('Deixar a IA escrever o texto "Sobre"?', data.about_ai, console, stream)
    )
    if not update.about_ai:
        update.about_text = _text("Texto Sobre", data.about_text, console, stream)

    update.author_bio_same_as_about = _confirm(
        'Usar um resumo do "Sobre" como bio do autor?',
        data.author_bio_same_as_about,
        console,
        stream,
    )
    if not update.author_bio_same_as_about:
        update.author_bio = _text("Bio do autor", data.author_bio, console, stream)

    update.contact_page_type = ContactPageType(
        _choice("Página de contato", CONTACT_PAGE_OPTIONS, data.contact_page_type.value, console, stream)
    )
    return update


def ask_design(data: WizardData, console: Console, stream: TextIO | None = None) -> WizardUpdate:
    update = WizardUpdate(
        visual_style=VisualStyle(
            _choice("Estilo visual", VISUAL_STYLE_OPTIONS, data.visual_style.value, console, stream)
        ),
        color_mode=ColorMode(
            Prompt.ask(
                "Modo de cor",
                console=console,
                choices=[m.value for m in ColorMode],
                default=data.color_mode.value,
                stream=stream,
            )
        ),
        font_style=FontStyle(
            _choice("Fonte", FONT_STYLE_OPTIONS, data.font_style.value, console, stream)
        ),
    )

    palette = Table(show_header=False, box=None, padding=(0, 1))
    for color in COLOR_PALETTE:
        palette.add_row(f"[{color.hex}]██[/]", color.hex, color.name)
    console.print(palette)
    update.primary_color = _text("Cor primária (hex)", data.primary_color, console, stream).strip()
    update.secondary_color = _text("Cor secundária (hex)", data.secondary_color, console, stream).strip()

    update.blog_style = BlogStyle(
        _choice("Estilo do blog", BLOG_STYLE_OPTIONS, data.blog_style.value, console, stream)
    )
    update.post_sidebar = _confirm("Post com sidebar?", data.post_sidebar, console, stream)

    sections = Table(show_header=False, box=None, padding=(0, 1))
    for opt in HOME_SECTION_OPTIONS:
        sections.add_row(f"[bold]{opt.id}[/bold]", f"{opt.emoji} {opt.label}")
    console.print(sections)
    update.home_sections = parse_section_list(
        _text(
            "Seções da home, na ordem (separadas por vírgula)",
            ", ".join(data.home_sections),
            console,
            stream,
        )
    )
    return update


STEP_FORMS: dict[int, StepForm] = {
    1: ask_repo,
    2: ask_brand,
    3: ask_nap,
    4: ask_seo,
    5: ask_content,
    6: ask_design,
}


# ---------------------------------------------------------------------------
# Type selection and result screens
# ---------------------------------------------------------------------------


def choose_site_type(console: Console, stream: TextIO | None = None) -> str:
    """Show the site-type cards and return the chosen id (or ``q``)."""
    console.print(Panel.fit(
        "[bold]Que tipo de site você quer criar?[/bold]\n"
        "Selecione o tipo de site para iniciar o wizard de criação de tema.",
        border_style="cyan",
    ))
    table = Table(show_header=False, box=None, padding=(0, 1))
    for site_type in SITE_TYPES:
        status = "[dim]🔒 Em breve[/dim]" if site_type.locked else "[green]Disponível[/green]"
        table.add_row(f"[bold]{site_type.id}[/bold]", f"{site_type.emoji} {site_type.label}", status)
    console.print(table)
    return Prompt.ask(
        "Tipo de site",
        console=console,
        choices=[t.id for t in SITE_TYPES] + [QUIT],
        default="blog",
        show_choices=False,
        stream=stream,
    )


def show_result(
    controller: WizardController,
    clipboard: PromptClipboard,
    generator: PromptGenerator,
    console: Console,
    stream: TextIO | None = None,
) -> str:
    """Display the generated prompt and handle copy / save actions.

    Returns:
        ``"r"`` to start over or ``"q"`` to leave.
    """
    data = controller.data
    console.print(Panel.fit(
        f"🚀 [bold]Prompt gerado com sucesso![/bold]\n"
        f"Tema [bold]{escape(data.brand_name)}[/bold] (slug: [cyan]{data.resolved_slug}[/cyan])",
        border_style="green",
    ))
    console.print(
        "[bold]Como usar este prompt[/bold]\n"
        "  1. Abra o Cursor e crie uma nova pasta vazia\n"
        "  2. Ative o Agent mode no chat\n"
        "  3. Copie o prompt abaixo\n"
        "  4. Cole no chat e pressione Enter\n"
        '  5. Quando pedir autenticação, clique "Authorize" no browser\n'
        "  6. Após o Cursor terminar, acesse localhost:4321 para ver o resultado"
    )
    console.print(f"[dim]{len(controller.prompt):,} caracteres[/dim]")
    console.print(Panel(Text(controller.prompt), title="Preview do prompt", border_style="dim"))

    while True:
        action = Prompt.ask(
            "(c) copiar  (s) salvar  (r) criar outro tema  (q) sair",
            console=console,
            choices=["c", "s", "r", QUIT],
            default="c",
            show_choices=False,
            stream=stream,
        )
        if action == "c":
            clipboard.copy(controller.prompt)
            if clipboard.copied:
                console.print("[bold green]✓ Copiado![/bold green]")
        elif action == "s":
            generator.save_prompt(controller.prompt, data.resolved_slug)
        else:
            return action


# ---------------------------------------------------------------------------
# Session loop
# ---------------------------------------------------------------------------


def run_interactive(
    config: Config | None = None,
    console: Console | None = None,
    stream: TextIO | None = None,
    controller: WizardController | None = None,
) -> WizardController:
    """Run a wizard session until the user quits.

    Returns:
        The controller, in whatever state the session ended.
    """
    config = config or Config()
    console = console or Console()
    if controller is None:
        controller = WizardController(
            on_scroll_top=lambda: console.clear() if console.is_terminal else None
        )
    clipboard = PromptClipboard(reset_after=config.copied_reset_seconds, console=console)
    generator = PromptGenerator(config.output_dir, console=console)

    while True:
        if controller.stage == Stage.TYPE_SELECT:
            type_id = choose_site_type(console, stream)
            if type_id == QUIT:
                return controller
            if not controller.select_type(type_id):
                console.print("[bold yellow]Este tipo de site estará disponível em breve.[/bold yellow]")
            continue

        if controller.stage == Stage.WIZARD:
            console.print(render_step_indicator(controller.step))
            print_step_header(controller.step, console)
            form = STEP_FORMS[controller.step]
            try:
                controller.update(form(controller.data, console, stream))
            except ValidationError as exc:
                console.print(f"[bold red]Valor inválido:[/bold red] {exc.errors()[0]['msg']}")
                continue

            nav_label = "(n) gerar prompt" if controller.is_last_step else "(n) próxima etapa"
            nav = Prompt.ask(
                f"{nav_label}  (e) editar  (b) voltar",
                console=console,
                choices=["n", "e", "b"],
                default="n",
                show_choices=False,
                stream=stream,
            )
            if nav == "n" and not controller.next():
                console.print(f"[bold red]⚠️  {controller.error}[/bold red]")
            elif nav == "b":
                controller.back()
            continue

        if show_result(controller, clipboard, generator, console, stream) == QUIT:
            return controller
        controller.restart()
