"""Theme prompt generation.

Turns the answers collected by the wizard into the single instruction
document the user pastes into a coding agent (Cursor Agent mode). The
document always has the same seven sections in the same order, separated by
``SEP``; only the file-creation task list in section 6 grows or shrinks with
the optional features, and its numbering stays contiguous.

``generate_prompt`` is pure: same ``WizardData`` in, byte-identical text out.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from theme_wizard.catalog import (
    BLOG_STYLE_DESCRIPTIONS,
    FONT_DESCRIPTIONS,
    HOME_SECTION_DESCRIPTIONS,
    SCHEMA_TYPES,
    SOCIAL_PLATFORMS,
    VISUAL_STYLE_DESCRIPTIONS,
)
from theme_wizard.models import BusinessType, ColorMode, ContactPageType, WizardData
from theme_wizard.utils import console as default_console

SEP = "━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━"

# Section 6 tasks are numbered "6.1", "6.2", ...
TASK_SECTION = 6

NO_SOCIALS = "Nenhuma rede social configurada"
NO_ADDRESS = "Não fornecido"

SLOGAN_AI = "Crie um slogan adequado ao nicho e à marca"
OG_TITLE_AI = "Gere um OG title para o site (máx 60 caracteres)"
OG_DESCRIPTION_AI = "Gere uma meta description para o site (máx 160 caracteres)"
ABOUT_AI = 'Escreva um texto "Sobre" adequado ao nicho e nome (3-4 parágrafos)'
AUTHOR_BIO_FROM_ABOUT = 'Resumo do texto "Sobre" em 2-3 frases'
AUTHOR_BIO_DEFAULT = "Bio curta baseada no nicho da marca"

_INTRO = (
    "Você é um desenvolvedor sênior especializado em Astro 5 + Tailwind CSS. "
    "Leia TODO este documento antes de executar qualquer ação. "
    "Siga as etapas na ordem exata indicada. Não pule nenhuma etapa."
)

_CLOSING = "FIM DO PROMPT — BOA SORTE! 🚀"


# ---------------------------------------------------------------------------
# Value resolution
# ---------------------------------------------------------------------------


def resolve_slogan(data: WizardData) -> str:
    return SLOGAN_AI if data.slogan_ai else data.slogan


def resolve_og_title(data: WizardData) -> str:
    return OG_TITLE_AI if data.og_title_ai else data.og_title


def resolve_og_description(data: WizardData) -> str:
    return OG_DESCRIPTION_AI if data.og_description_ai else data.og_description


def resolve_about_text(data: WizardData) -> str:
    return ABOUT_AI if data.about_ai else data.about_text


def resolve_author_bio(data: WizardData) -> str:
    """The "same as About" flag wins over whatever bio was typed."""
    if data.author_bio_same_as_about:
        return AUTHOR_BIO_FROM_ABOUT
    return data.author_bio or AUTHOR_BIO_DEFAULT


def schema_type(business_type: BusinessType) -> str:
    """Map a business type to its Schema.org ``@type``."""
    return SCHEMA_TYPES[business_type.value]


# ---------------------------------------------------------------------------
# Sub-list formatters
# ---------------------------------------------------------------------------


def format_socials(data: WizardData) -> str:
    """Comma-join the filled social handles as ``Platform: value``."""
    items = []
    for platform in SOCIAL_PLATFORMS:
        handle = getattr(data, platform.field)
        if handle:
            items.append(f"{platform.prompt_label}: {platform.prefix}{handle}")
    return ", ".join(items) if items else NO_SOCIALS


def format_address(data: WizardData) -> str:
    """Join the filled address parts with an em dash.

    Street and number only show up together; the complement rides along
    with them.
    """
    parts = []
    if data.address_street and data.address_number:
        street = f"{data.address_street}, {data.address_number}"
        if data.address_complement:
            street += f" {data.address_complement}"
        parts.append(street)
    if data.address_city:
        parts.append(data.address_city)
    if data.address_state:
        parts.append(data.address_state)
    if data.address_zip:
        parts.append(f"CEP {data.address_zip}")
    return " — ".join(parts) if parts else NO_ADDRESS


def format_home_sections(sections: tuple[str, ...] | list[str]) -> str:
    """Number the selected home sections in the order the user picked them.

    Unknown ids are passed through untouched.
    """
    return "\n".join(
        f"  {i}. {HOME_SECTION_DESCRIPTIONS.get(section_id, section_id)}"
        for i, section_id in enumerate(sections, start=1)
    )


# ---------------------------------------------------------------------------
# Section 6: file-creation tasks
# ---------------------------------------------------------------------------


def _task_tailwind(data: WizardData) -> list[str]:
    return [
        "tailwind.config.mjs",
        f"     → Encontre a chave \"primary\" em theme.extend.colors e modifique para: '{data.primary_color}'",
        f"     → Se existir \"secondary\", modifique para: '{data.secondary_color}'",
    ]


def _task_header(data: WizardData, slug: str) -> list[str]:
    return [
        f"src/themes/{slug}/components/Header.astro",
        f"     → Logo/nome \"{data.brand_name}\" no lado esquerdo",
        "     → Navegação responsiva com menu hambúrguer no mobile",
        "     → Links: Home (/), Blog (/blog), Sobre (/sobre), Contato (/contato)",
        "     → Use APENAS CSS variables para cores (--blog-nav-bg, --blog-text, --blog-border etc.)",
    ]


def _task_footer(data: WizardData, slug: str, socials: str) -> list[str]:
    social_line = ""
    if socials != NO_SOCIALS:
        social_line = f"→ Links/ícones das redes sociais: {socials}"
    return [
        f"src/themes/{slug}/components/Footer.astro",
        f"     → Copyright \"© {{new Date().getFullYear()}} {data.brand_name}\"",
        "     → Links de navegação",
        f"     {social_line}",
    ]


def _task_home(slug: str, home_sections: str) -> list[str]:
    return [
        f"src/themes/{slug}/Home.astro",
        "     → Importe posts: const posts = await getCollection('posts')",
        "     → Use os 5 posts mais recentes na seção de destaques",
        "     → Crie as seções nesta ordem exata:",
        home_sections,
        "     → Use APENAS CSS variables para cores",
    ]


def _task_blog_list(data: WizardData, slug: str) -> list[str]:
    return [
        f"src/themes/{slug}/BlogList.astro",
        f"     → Estilo: {BLOG_STYLE_DESCRIPTIONS[data.blog_style.value]}",
        "     → Importe: const posts = await getCollection('posts')",
        "     → Ordene por publishedDate (mais recente primeiro)",
        "     → Exiba em cada item: thumbnail, título, categoria, data e resumo",
    ]


def _task_blog_post(data: WizardData, slug: str) -> list[str]:
    if data.post_sidebar:
        layout = (
            "COM sidebar lateral sticky — exiba: avatar/nome do autor, bio, data de "
            "publicação, categoria e botão \"← Voltar ao Blog\""
        )
    else:
        layout = "SEM sidebar — layout de leitura centrado com largura máxima de ~720px"
    return [
        f"src/themes/{slug}/BlogPost.astro",
        f"     → Modelo: {layout}",
        "     → Exiba: thumbnail, título, data, nome do autor, conteúdo, categoria",
        "     → Para buscar o autor: import { getEntry } from 'astro:content'",
    ]


def _task_settings(data: WizardData, slug: str, og_title: str, og_description: str) -> list[str]:
    canonical = f"canonicalUrl: '{data.canonical_url}'" if data.canonical_url else ""
    schema = f"schemaType: '{schema_type(data.business_type)}'" if data.generate_schema else ""
    og_image = f"ogImage: '{data.og_image}'" if data.og_image else ""
    return [
        "src/content/singletons/settings.yaml",
        "     → Adicione ou modifique os campos:",
        f"       activeTheme: '{slug}'",
        f"       colorScheme: '{data.color_mode.value}'",
        f"       titleSeparator: '{data.title_separator.value}'",
        f"       {canonical}",
        f"       {schema}",
        f"       ogTitle: '{og_title}'",
        f"       ogDescription: '{og_description}'",
        f"       {og_image}",
    ]


def _task_contact_yaml(data: WizardData) -> list[str]:
    street = f"{data.address_street}, {data.address_number}" if data.address_street else ""
    return [
        "src/content/singletons/contact.yaml (crie se não existir)",
        f"     name: \"{data.business_name or data.brand_name}\"",
        f"     phone: \"{data.phone}\"",
        f"     email: \"{data.email}\"",
        f"     address: \"{street}\"",
        f"     city: \"{data.address_city}\"",
        f"     state: \"{data.address_state}\"",
        f"     zip: \"{data.address_zip}\"",
        f"     instagram: \"{data.social_instagram}\"",
        f"     youtube: \"{data.social_youtube}\"",
        f"     linkedin: \"{data.social_linkedin}\"",
        f"     twitter: \"{data.social_twitter}\"",
    ]


def _task_about_yaml(about_text: str, author_bio: str) -> list[str]:
    return [
        "src/content/singletons/about.yaml (crie se não existir)",
        "     title: \"Sobre\"",
        f"     content: \"{about_text}\"",
        f"     authorBio: \"{author_bio}\"",
    ]


def _task_robots(data: WizardData) -> list[str]:
    if data.canonical_url:
        sitemap = f"Sitemap: {data.canonical_url}/sitemap.xml"
    else:
        sitemap = "Sitemap: https://seusite.com/sitemap.xml"
    return [
        "public/robots.txt (crie se não existir)",
        "     User-agent: *",
        "     Allow: /",
        "     Disallow: /admin",
        f"     {sitemap}",
    ]


def _task_sitemap() -> list[str]:
    return [
        "astro.config.mjs — adicione a integração de sitemap:",
        "     import sitemap from '@astrojs/sitemap';",
        "     → No array integrations: adicione sitemap({ ... })",
        "     → Se o pacote @astrojs/sitemap não estiver instalado, rode: bun add @astrojs/sitemap",
    ]


def _task_contact_page(data: WizardData) -> list[str]:
    if data.contact_page_type == ContactPageType.WITH_FORM:
        form = "→ Inclua formulário de contato simples (nome, email, mensagem) com validação básica"
    else:
        form = "→ Exiba apenas o NAP — sem formulário"
    return [
        "src/pages/contato.astro (crie se não existir)",
        "     → Importe e exiba os dados do contact.yaml (nome, telefone, email, endereço)",
        f"     {form}",
    ]


def _task_validation() -> list[str]:
    return [
        "VALIDAÇÃO OBRIGATÓRIA — rode o servidor e verifique:",
        "     bun dev",
        "     ✓ localhost:4321 carrega sem erros no terminal",
        "     ✓ Sem erros TypeScript ou Astro no console",
        "     ✓ /blog lista os posts corretamente",
        "     ✓ /blog/[slug] abre um post sem erros",
        "     ✓ Menu mobile funciona em tela estreita",
        "     ✓ Cores e fontes aplicadas conforme a identidade",
    ]


def build_tasks(data: WizardData) -> list[str]:
    """Build the numbered file-creation tasks for section 6.

    robots.txt, the sitemap integration and the contact page are only
    included when enabled. Numbering is assigned after the optional tasks
    are filtered, so it never has gaps.

    Returns:
        One string per task, each starting with its ``6.N`` label.
    """
    slug = data.resolved_slug
    socials = format_socials(data)

    tasks: list[list[str]] = [
        _task_tailwind(data),
        _task_header(data, slug),
        _task_footer(data, slug, socials),
        _task_home(slug, format_home_sections(data.home_sections)),
        _task_blog_list(data, slug),
        _task_blog_post(data, slug),
        _task_settings(data, slug, resolve_og_title(data), resolve_og_description(data)),
        _task_contact_yaml(data),
        _task_about_yaml(resolve_about_text(data), resolve_author_bio(data)),
    ]
    if data.generate_robots:
        tasks.append(_task_robots(data))
    if data.generate_sitemap:
        tasks.append(_task_sitemap())
    if data.contact_page_type != ContactPageType.NONE:
        tasks.append(_task_contact_page(data))
    tasks.append(_task_validation())

    return [
        f"{TASK_SECTION}.{n}  " + "\n".join(lines)
        for n, lines in enumerate(tasks, start=1)
    ]


# ---------------------------------------------------------------------------
# Top-level sections
# ---------------------------------------------------------------------------


def _section(title: str, lines: list[str]) -> str:
    return f"{SEP}\n{title}\n{SEP}\n" + "\n".join(lines)


def _environment_section(data: WizardData) -> str:
    return _section("ETAPA 1 — PREPARAR AMBIENTE", [
        "Execute estes comandos no terminal integrado do Cursor:",
        "",
        "  gh auth login",
        f"  git clone {data.repo_url} .",
        "  bun install",
    ])


def _rules_section(data: WizardData, slug: str) -> str:
    return _section("ETAPA 2 — REGRAS ABSOLUTAS DO PROJETO CNX", [
        "NUNCA modifique os seguintes arquivos/pastas — são o núcleo do sistema:",
        "  • src/pages/admin/           → painel administrativo",
        "  • src/utils/                 → utilitários críticos",
        "  • src/pages/api/             → rotas de API existentes",
        "  • src/layouts/AdminLayout.astro",
        "  • src/content/config.ts",
        "  • astro.config.mjs / package.json / tsconfig.json / bun.lock",
        "",
        f"O tema fica EXCLUSIVAMENTE em: src/themes/{slug}/",
        "  Arquivos obrigatórios:",
        "  - Home.astro",
        "  - BlogList.astro",
        "  - BlogPost.astro",
        "  - components/Header.astro",
        "  - components/Footer.astro",
        "",
        "Como as rotas funcionam (NÃO altere estes arquivos de página):",
        "  src/pages/index.astro       → importa Home.astro do tema ativo",
        "  src/pages/blog/index.astro  → importa BlogList.astro",
        "  src/pages/blog/[slug].astro → importa BlogPost.astro",
        "",
        "SEMPRE use CSS variables para cores — NUNCA hardcode valores hex diretamente:",
        "  --blog-bg, --blog-section-alt, --blog-section-dark",
        "  --blog-surface, --blog-surface-hover, --blog-border",
        "  --blog-text, --blog-text-muted, --blog-text-subtle",
        "  --blog-hero-grad, --blog-nav-bg, --blog-nav-border",
        "",
        "Cor de destaque (primary):",
        f"  → Configure em tailwind.config.mjs: primary: '{data.primary_color}'",
        "  → Use text-primary / bg-primary / border-primary no Tailwind",
        "",
        "Imports corretos a usar nos templates:",
        "  import { getCollection } from 'astro:content';",
        "  import MainLayout from '@/layouts/MainLayout.astro';",
        "  import type { CollectionEntry } from 'astro:content';",
    ])


def _brand_section(data: WizardData, slug: str, niche: str) -> str:
    mode = "Escuro (dark)" if data.color_mode == ColorMode.DARK else "Claro (light)"
    return _section("ETAPA 3 — IDENTIDADE DA MARCA", [
        f"Nome da marca:    {data.brand_name}",
        f"Nicho:            {niche}",
        f"Slogan:           {resolve_slogan(data)}",
        f"Cor primária:     {data.primary_color}",
        f"Cor secundária:   {data.secondary_color}",
        f"Estilo visual:    {VISUAL_STYLE_DESCRIPTIONS[data.visual_style.value]}",
        f"Modo padrão:      {mode}",
        f"Fonte:            {FONT_DESCRIPTIONS[data.font_style.value]}",
        f"Slug do tema:     {slug}",
    ])


def _business_section(data: WizardData) -> str:
    schema = schema_type(data.business_type)
    separator = data.title_separator.value
    gsc = f"GSC Verification: {data.gsc_code}" if data.gsc_code else ""
    og_image = data.og_image or "Não fornecida (use a thumbnail do post quando disponível)"
    return _section("ETAPA 4 — DADOS DE NEGÓCIO & SEO", [
        f"Nome oficial:     {data.business_name or data.brand_name}",
        f"Schema.org type:  {schema if data.generate_schema else 'Não gerar Schema.org'}",
        f"Telefone:         {data.phone or 'Não fornecido'}",
        f"E-mail:           {data.email or 'Não fornecido'}",
        f"Endereço:         {format_address(data)}",
        f"URL canônica:     {data.canonical_url or 'Não fornecida'}",
        f"Redes sociais:    {format_socials(data)}",
        "",
        "Open Graph:",
        f"  OG Title:        {resolve_og_title(data)}",
        f"  OG Description:  {resolve_og_description(data)}",
        f"  OG Image:        {og_image}",
        f"  Separador:       {separator}  (ex: \"Nome do Post {separator} {data.brand_name}\")",
        f"  Twitter handle:  {data.twitter_handle or 'Não fornecido'}",
        f"  {gsc}",
        "",
        f"Gerar sitemap.xml:   {'Sim — use @astrojs/sitemap' if data.generate_sitemap else 'Não'}",
        f"Gerar robots.txt:    {'Sim' if data.generate_robots else 'Não'}",
        "Gerar Schema.org:    "
        + (f"Sim — JSON-LD tipo {schema} no <head>" if data.generate_schema else "Não"),
    ])


def _structure_section(data: WizardData) -> str:
    if data.post_sidebar:
        post_layout = "COM sidebar lateral sticky (autor, data, categoria, botão voltar ao blog)"
    else:
        post_layout = "SEM sidebar — layout de leitura centrado, foco no conteúdo"
    return _section("ETAPA 5 — ESTRUTURA DO SITE", [
        "Seções da Home (nesta ordem exata):",
        format_home_sections(data.home_sections),
        "",
        f"Estilo do blog:   {BLOG_STYLE_DESCRIPTIONS[data.blog_style.value]}",
        "",
        f"Modelo do post:   {post_layout}",
    ])


def _tasks_section(data: WizardData) -> str:
    return _section(
        "ETAPA 6 — CRIAR OS ARQUIVOS (execute nesta ordem exata)",
        ["\n\n".join(build_tasks(data))],
    )


def _publish_section(data: WizardData, slug: str, niche: str) -> str:
    return _section("ETAPA 7 — PUBLICAR NA VERCEL", [
        "Após confirmar que tudo funciona em localhost sem erros:",
        "",
        "  git add .",
        f"  git commit -m \"feat: tema {slug} criado — {niche}\"",
        f"  git push origin {data.branch}",
        "",
        "A Vercel detecta o push e faz rebuild automático em aproximadamente 2 minutos.",
        "Acesse o site no ar e valide o resultado final.",
    ])


def generate_prompt(data: WizardData) -> str:
    """Assemble the full theme-creation prompt.

    Args:
        data: The completed wizard answers.

    Returns:
        The prompt text. Empty optional fields are filled with fallback
        wording; the function never raises for valid ``WizardData``.
    """
    slug = data.resolved_slug
    niche = data.resolved_niche

    blocks = [
        _INTRO,
        _environment_section(data),
        _rules_section(data, slug),
        _brand_section(data, slug, niche),
        _business_section(data),
        _structure_section(data),
        _tasks_section(data),
        _publish_section(data, slug, niche),
        f"{SEP}\n{_CLOSING}\n{SEP}",
    ]
    return "\n\n".join(blocks)


class PromptGenerator:
    """Generates theme prompts and stores them under ``<output_dir>/prompts``."""

    def __init__(self, output_dir: str | Path = "./output", console: Console | None = None):
        self.output_dir = Path(output_dir)
        self.console = console or default_console

    def generate(self, data: WizardData) -> str:
        prompt = generate_prompt(data)
        self.console.print(
            f"[cyan]Generated prompt for[/cyan] [bold]{data.resolved_slug}[/bold] "
            f"({len(prompt)} chars)"
        )
        return prompt

    def save_prompt(self, prompt: str, slug: str) -> Path:
        """Write *prompt* to ``<output_dir>/prompts/theme-<slug>.md``.

        Creates the directory if needed and returns the written path.
        """
        prompts_dir = self.output_dir / "prompts"
        prompts_dir.mkdir(parents=True, exist_ok=True)

        filepath = prompts_dir / f"theme-{slug or 'tema'}.md"
        filepath.write_text(prompt, encoding="utf-8")

        self.console.print(
            Panel(
                f"[green]Prompt saved[/green]\n"
                f"  Path: {filepath}\n"
                f"  Size: {len(prompt)} chars\n"
                f"  Theme: {slug}",
                title="Prompt Ready",
                border_style="green",
            )
        )
        return filepath

    def generate_and_save(self, data: WizardData) -> tuple[str, Path]:
        prompt = self.generate(data)
        path = self.save_prompt(prompt, data.resolved_slug)
        return prompt, path
