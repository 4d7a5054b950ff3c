"""Form state collected by the theme wizard.

``WizardData`` is a frozen Pydantic v2 model: each step produces a
``WizardUpdate`` and the controller swaps in ``data.apply(update)``. JSON
aliases follow the camelCase keys of the admin panel so that an answers file
exported from the browser can be loaded as-is.
"""

from __future__ import annotations

import re
import unicodedata
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from theme_wizard.catalog import CUSTOM_NICHE_ID, SOCIAL_PLATFORMS

_HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


def slugify(text: str) -> str:
    """Turn a display name into a theme slug.

    Examples::

        slugify("João Silva")        -> "joao-silva"
        slugify("  Café & Cia!!  ")  -> "cafe-cia"
    """
    result = unicodedata.normalize("NFD", text.lower())
    result = re.sub(r"[\u0300-\u036f]", "", result)
    result = re.sub(r"[^a-z0-9]+", "-", result)
    return result.strip("-")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BusinessType(str, Enum):
    PERSON = "person"
    LOCAL = "local"
    ORGANIZATION = "organization"
    ECOMMERCE = "ecommerce"


class TitleSeparator(str, Enum):
    PIPE = "|"
    EM_DASH = "—"
    BULLET = "•"


class ContactPageType(str, Enum):
    NONE = "none"
    NAP_ONLY = "nap-only"
    WITH_FORM = "with-form"


class VisualStyle(str, Enum):
    MINIMAL = "minimal"
    BOLD = "bold"
    ELEGANT = "elegant"
    TECH = "tech"
    ORGANIC = "organic"


class ColorMode(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class FontStyle(str, Enum):
    SANS = "sans"
    SERIF = "serif"
    DISPLAY = "display"


class BlogStyle(str, Enum):
    MAGAZINE = "magazine"
    GRID = "grid"
    LIST = "list"


_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)


# ---------------------------------------------------------------------------
# Form state
# ---------------------------------------------------------------------------


class WizardData(BaseModel):
    """Every answer collected across the six wizard steps."""

    model_config = ConfigDict(**_MODEL_CONFIG, frozen=True)

    # Step 1 -- repository
    repo_url: str = ""
    branch: str = "main"

    # Step 2 -- brand identity
    brand_name: str = ""
    niche: str = ""
    custom_niche: str = ""
    slogan: str = ""
    slogan_ai: bool = Field(default=True, alias="sloganAI")

    # Step 3 -- NAP & contact
    business_name: str = ""
    business_type: BusinessType = BusinessType.PERSON
    address_street: str = ""
    address_number: str = ""
    address_complement: str = ""
    address_city: str = ""
    address_state: str = ""
    address_zip: str = ""
    phone: str = ""
    email: str = ""
    canonical_url: str = ""
    social_instagram: str = ""
    social_youtube: str = ""
    social_linkedin: str = ""
    social_pinterest: str = ""
    social_tiktok: str = ""
    social_twitter: str = ""

    # Step 4 -- SEO & Open Graph
    title_separator: TitleSeparator = TitleSeparator.PIPE
    og_title: str = ""
    og_title_ai: bool = Field(default=True, alias="ogTitleAI")
    og_description: str = ""
    og_description_ai: bool = Field(default=True, alias="ogDescriptionAI")
    og_image: str = ""
    twitter_handle: str = ""
    gsc_code: str = ""
    generate_schema: bool = True
    generate_sitemap: bool = True
    generate_robots: bool = True

    # Step 5 -- initial content
    about_text: str = ""
    about_ai: bool = Field(default=True, alias="aboutAI")
    contact_page_type: ContactPageType = ContactPageType.WITH_FORM
    author_bio: str = ""
    author_bio_same_as_about: bool = False

    # Step 6 -- design & structure
    visual_style: VisualStyle = VisualStyle.MINIMAL
    color_mode: ColorMode = ColorMode.DARK
    font_style: FontStyle = FontStyle.SANS
    primary_color: str = Field(default="#a855f7", pattern=_HEX_COLOR)
    secondary_color: str = Field(default="#06b6d4", pattern=_HEX_COLOR)
    blog_style: BlogStyle = BlogStyle.GRID
    post_sidebar: bool = True
    home_sections: tuple[str, ...] = ("hero", "featured-posts")
    theme_slug: str = ""

    @property
    def resolved_slug(self) -> str:
        """The explicit slug override, or the slugified brand name."""
        return self.theme_slug or slugify(self.brand_name)

    @property
    def resolved_niche(self) -> str:
        if self.niche == CUSTOM_NICHE_ID:
            return self.custom_niche
        return self.niche

    def social_handles(self) -> dict[str, str]:
        """Return ``{field: handle}`` for every social field, in prompt order."""
        return {p.field: getattr(self, p.field) for p in SOCIAL_PLATFORMS}

    def apply(self, update: WizardUpdate) -> WizardData:
        """Return a new instance with the explicitly set fields of *update* applied.

        The merged values are re-validated, so an update can never produce a
        state the model itself would reject.
        """
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return self
        return type(self).model_validate({**self.model_dump(), **changes})

    def toggle_home_section(self, section_id: str) -> WizardData:
        """Remove *section_id* if selected, else append it after the current picks."""
        current = self.home_sections
        if section_id in current:
            sections = tuple(s for s in current if s != section_id)
        else:
            sections = (*current, section_id)
        return self.apply(WizardUpdate(home_sections=sections))


class WizardUpdate(BaseModel):
    """A partial change to ``WizardData``.

    Each step fills only the fields it owns; anything left unset is ignored by
    ``WizardData.apply``.
    """

    model_config = _MODEL_CONFIG

    repo_url: str | None = None
    branch: str | None = None

    brand_name: str | None = None
    niche: str | None = None
    custom_niche: str | None = None
    slogan: str | None = None
    slogan_ai: bool | None = Field(default=None, alias="sloganAI")

    business_name: str | None = None
    business_type: BusinessType | None = None
    address_street: str | None = None
    address_number: str | None = None
    address_complement: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    phone: str | None = None
    email: str | None = None
    canonical_url: str | None = None
    social_instagram: str | None = None
    social_youtube: str | None = None
    social_linkedin: str | None = None
    social_pinterest: str | None = None
    social_tiktok: str | None = None
    social_twitter: str | None = None

    title_separator: TitleSeparator | None = None
    og_title: str | None = None
    og_title_ai: bool | None = Field(default=None, alias="ogTitleAI")
    og_description: str | None = None
    og_description_ai: bool | None = Field(default=None, alias="ogDescriptionAI")
    og_image: str | None = None
    twitter_handle: str | None = None
    gsc_code: str | None = None
    generate_schema: bool | None = None
    generate_sitemap: bool | None = None
    generate_robots: bool | None = None

    about_text: str | None = None
    about_ai: bool | None = Field(default=None, alias="aboutAI")
    contact_page_type: ContactPageType | None = None
    author_bio: str | None = None
    author_bio_same_as_about: bool | None = None

    visual_style: VisualStyle | None = None
    color_mode: ColorMode | None = None
    font_style: FontStyle | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    blog_style: BlogStyle | None = None
    post_sidebar: bool | None = None
    home_sections: tuple[str, ...] | None = None
    theme_slug: str | None = None
