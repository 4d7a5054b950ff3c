"""Theme wizard configuration.

Typed settings for the CLI, the clipboard helper and the version-check
service. Pydantic v2 validates the values at construction time and handles
JSON round-tripping.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global theme wizard configuration.

    Created once by the CLI (usually via ``from_env``) and handed to the
    version checker, the HTTP app and the prompt writer.
    """

    # Official template repository the installed site was cloned from.
    template_owner: str = Field(default="8linksapp-maker")
    template_repo: str = Field(default="cnx")
    template_branch: str = Field(default="main")

    version_file: Path = Field(default=Path("VERSION"))
    fetch_timeout: float = Field(
        default=5.0, gt=0, description="Timeout in seconds for the latest-version fetch"
    )
    copied_reset_seconds: float = Field(
        default=3.0, ge=0, description="How long the 'copied' indicator stays on"
    )
    output_dir: Path = Field(default=Path("./output"))

    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=8787, ge=1024, le=65535)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def changelog_url(self) -> str:
        return (
            f"https://github.com/{self.template_owner}/{self.template_repo}"
            f"/blob/{self.template_branch}/CHANGELOG.md"
        )

    @property
    def version_url(self) -> str:
        """Raw URL of the ``VERSION`` file on the template's main branch."""
        return (
            f"https://raw.githubusercontent.com/{self.template_owner}/{self.template_repo}"
            f"/{self.template_branch}/VERSION"
        )

    @property
    def prompts_dir(self) -> Path:
        """Directory where saved prompts are written."""
        return self.output_dir / "prompts"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as JSON and return the written path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CNX_TEMPLATE_OWNER, CNX_TEMPLATE_REPO, CNX_VERSION_FILE,
            CNX_FETCH_TIMEOUT, CNX_OUTPUT_DIR, CNX_SERVER_HOST,
            CNX_SERVER_PORT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CNX_TEMPLATE_OWNER"):
            kwargs["template_owner"] = os.environ["CNX_TEMPLATE_OWNER"]
        if os.environ.get("CNX_TEMPLATE_REPO"):
            kwargs["template_repo"] = os.environ["CNX_TEMPLATE_REPO"]
        if os.environ.get("CNX_VERSION_FILE"):
            kwargs["version_file"] = Path(os.environ["CNX_VERSION_FILE"])
        if os.environ.get("CNX_FETCH_TIMEOUT"):
            kwargs["fetch_timeout"] = float(os.environ["CNX_FETCH_TIMEOUT"])
        if os.environ.get("CNX_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CNX_OUTPUT_DIR"])
        if os.environ.get("CNX_SERVER_HOST"):
            kwargs["server_host"] = os.environ["CNX_SERVER_HOST"]
        if os.environ.get("CNX_SERVER_PORT"):
            kwargs["server_port"] = int(os.environ["CNX_SERVER_PORT"])
        return cls(**kwargs)
