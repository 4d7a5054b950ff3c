"""Static option tables shared by the wizard screens and the prompt generator.

Everything here is loaded once at import time and never mutated: option
lists are tuples of frozen models and the lookup tables are wrapped in
``MappingProxyType``.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class Option(BaseModel):
    """A selectable choice rendered by one of the wizard steps."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    emoji: str = ""
    description: str = ""


class SiteType(Option):
    """A site type offered on the selection screen."""

    locked: bool = True


class PaletteColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    hex: str


class SocialPlatform(BaseModel):
    """How one social handle field is labelled and rendered in the prompt."""

    model_config = ConfigDict(frozen=True)

    field: str
    label: str
    prompt_label: str
    prefix: str = ""
    placeholder: str = ""


TOTAL_STEPS = 6

STEP_LABELS: tuple[str, ...] = (
    "Repositório",
    "Marca",
    "NAP & Contato",
    "SEO & Open Graph",
    "Conteúdo",
    "Design",
)

# Niche id that switches the prompt over to the free-text custom niche.
CUSTOM_NICHE_ID = "outro"

NICHE_OPTIONS: tuple[Option, ...] = (
    Option(id="financas", label="Finanças", emoji="💰"),
    Option(id="saude", label="Saúde & Bem-estar", emoji="💪"),
    Option(id="marketing", label="Marketing & Negócios", emoji="📈"),
    Option(id="tecnologia", label="Tecnologia", emoji="💻"),
    Option(id="gastronomia", label="Gastronomia", emoji="🍕"),
    Option(id="lifestyle", label="Lifestyle", emoji="✨"),
    Option(id="educacao", label="Educação", emoji="🎓"),
    Option(id="moda", label="Moda & Beleza", emoji="👗"),
    Option(id="espiritualidade", label="Espiritualidade", emoji="🧘"),
    Option(id="esportes", label="Esportes & Fitness", emoji="🏋️"),
    Option(id="viagem", label="Viagem & Turismo", emoji="✈️"),
    Option(id=CUSTOM_NICHE_ID, label="Outro", emoji="📝"),
)

COLOR_PALETTE: tuple[PaletteColor, ...] = (
    PaletteColor(name="Roxo Criativo", hex="#a855f7"),
    PaletteColor(name="Azul Confiança", hex="#3b82f6"),
    PaletteColor(name="Verde Natureza", hex="#22c55e"),
    PaletteColor(name="Laranja Energia", hex="#f97316"),
    PaletteColor(name="Rosa Feminino", hex="#ec4899"),
    PaletteColor(name="Vermelho Impacto", hex="#ef4444"),
    PaletteColor(name="Ciano Tech", hex="#06b6d4"),
    PaletteColor(name="Âmbar Premium", hex="#f59e0b"),
    PaletteColor(name="Índigo Elegante", hex="#6366f1"),
    PaletteColor(name="Esmeralda", hex="#10b981"),
)

HOME_SECTION_OPTIONS: tuple[Option, ...] = (
    Option(id="hero", label="Hero com headline + CTA", emoji="🎯"),
    Option(id="featured-posts", label="Posts em destaque", emoji="📰"),
    Option(id="about-bio", label="Sobre / Bio do criador", emoji="👤"),
    Option(id="categories", label="Categorias em destaque", emoji="🏷️"),
    Option(id="newsletter-cta", label="CTA para newsletter / produto", emoji="📧"),
    Option(id="testimonials", label="Depoimentos / prova social", emoji="⭐"),
    Option(id="faq", label="FAQ", emoji="❓"),
)

SITE_TYPES: tuple[SiteType, ...] = (
    SiteType(id="blog", label="Blog / Conteúdo", emoji="📝", locked=False),
    SiteType(id="imobiliaria", label="Imobiliária", emoji="🏠"),
    SiteType(id="restaurante", label="Restaurante", emoji="🍕"),
    SiteType(id="portfolio", label="Portfólio", emoji="💼"),
    SiteType(id="clinica", label="Clínica / Saúde", emoji="👩‍⚕️"),
    SiteType(id="curso", label="Curso / Mentoria", emoji="🎓"),
)

BUSINESS_TYPE_OPTIONS: tuple[Option, ...] = (
    Option(id="person", label="Pessoa / Criador", emoji="👤"),
    Option(id="local", label="Empresa Local", emoji="🏢"),
    Option(id="organization", label="Organização / ONG", emoji="🌐"),
    Option(id="ecommerce", label="E-commerce / Loja", emoji="🛒"),
)

CONTACT_PAGE_OPTIONS: tuple[Option, ...] = (
    Option(
        id="with-form",
        label="NAP + Formulário",
        emoji="📋",
        description="Endereço, telefone, e-mail e formulário de contato",
    ),
    Option(
        id="nap-only",
        label="Apenas NAP",
        emoji="📍",
        description="Só exibe endereço, telefone e e-mail, sem formulário",
    ),
    Option(id="none", label="Sem página", emoji="✕", description="Não criar página /contato"),
)

VISUAL_STYLE_OPTIONS: tuple[Option, ...] = (
    Option(id="minimal", label="Minimalista", emoji="◻️"),
    Option(id="bold", label="Bold/Impactante", emoji="⚡"),
    Option(id="elegant", label="Elegante/Luxo", emoji="✨"),
    Option(id="tech", label="Moderno/Tech", emoji="🔷"),
    Option(id="organic", label="Orgânico", emoji="🌿"),
)

FONT_STYLE_OPTIONS: tuple[Option, ...] = (
    Option(id="sans", label="Sem serifa", description="Inter, DM Sans"),
    Option(id="serif", label="Serifada", description="Playfair, Lora"),
    Option(id="display", label="Display", description="Outfit, Syne"),
)

BLOG_STYLE_OPTIONS: tuple[Option, ...] = (
    Option(id="magazine", label="Magazine", description="1 post grande em destaque + grid menor"),
    Option(id="grid", label="Grid", description="Cards iguais em colunas"),
    Option(id="list", label="Lista", description="Imagem à esquerda, texto à direita"),
)

# Order matters: this is the order handles appear in the generated prompt.
SOCIAL_PLATFORMS: tuple[SocialPlatform, ...] = (
    SocialPlatform(
        field="social_instagram", label="Instagram", prompt_label="Instagram",
        prefix="@", placeholder="@usuario",
    ),
    SocialPlatform(
        field="social_youtube", label="YouTube", prompt_label="YouTube",
        placeholder="https://youtube.com/...",
    ),
    SocialPlatform(
        field="social_linkedin", label="LinkedIn", prompt_label="LinkedIn",
        placeholder="https://linkedin.com/...",
    ),
    SocialPlatform(
        field="social_pinterest", label="Pinterest", prompt_label="Pinterest",
        prefix="@", placeholder="@usuario",
    ),
    SocialPlatform(
        field="social_tiktok", label="TikTok", prompt_label="TikTok",
        prefix="@", placeholder="@usuario",
    ),
    SocialPlatform(
        field="social_twitter", label="X / Twitter", prompt_label="X/Twitter",
        prefix="@", placeholder="@usuario",
    ),
)

# ---------------------------------------------------------------------------
# Prose tables used by the prompt generator
# ---------------------------------------------------------------------------

HOME_SECTION_DESCRIPTIONS = MappingProxyType({
    "hero": "Hero com headline impactante e botão CTA principal",
    "featured-posts": "Posts em destaque — últimas publicações do blog",
    "about-bio": "Seção Sobre/Bio do criador com foto e texto",
    "categories": "Categorias em destaque com ícones ou imagens",
    "newsletter-cta": "CTA para newsletter ou produto principal",
    "testimonials": "Depoimentos e prova social de leitores/clientes",
    "faq": "FAQ — perguntas frequentes",
})

SCHEMA_TYPES = MappingProxyType({
    "person": "Person",
    "local": "LocalBusiness",
    "organization": "Organization",
    "ecommerce": "Store",
})

VISUAL_STYLE_DESCRIPTIONS = MappingProxyType({
    "minimal": "Minimalista — espaço generoso, tipografia limpa, sem excesso de elementos decorativos",
    "bold": "Bold/Impactante — contrastes fortes, tipografia expressiva grande, elementos visuais marcantes",
    "elegant": "Elegante/Luxo — refinado, paleta sóbria, detalhes sutis, sensação premium",
    "tech": "Moderno/Tech — linhas retas, elementos geométricos, estética de produto digital",
    "organic": "Orgânico/Natural — curvas suaves, texturas orgânicas, sensação acolhedora e humana",
})

FONT_DESCRIPTIONS = MappingProxyType({
    "sans": "Sans-serif moderna — Inter, Plus Jakarta Sans ou DM Sans",
    "serif": "Serifada elegante — Playfair Display, Lora ou Merriweather",
    "display": "Display/Expressiva — Outfit, Syne ou Space Grotesk",
})

BLOG_STYLE_DESCRIPTIONS = MappingProxyType({
    "magazine": (
        "Magazine — 1 post principal em destaque grande + grid de posts menores "
        "abaixo (estilo portal/news)"
    ),
    "grid": "Grid — cards iguais em 3 colunas (desktop), 2 (tablet), 1 (mobile)",
    "list": (
        "Lista — cada post em linha completa com imagem à esquerda e texto à "
        "direita (estilo Medium)"
    ),
})


def unlocked_site_types() -> list[SiteType]:
    """Return the site types the wizard can currently start with."""
    return [t for t in SITE_TYPES if not t.locked]


def find_site_type(type_id: str) -> SiteType | None:
    for site_type in SITE_TYPES:
        if site_type.id == type_id:
            return site_type
    return None
