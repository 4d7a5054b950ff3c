"""Installed-vs-latest template version check.

Reads the local ``VERSION`` file and fetches the one published on the
template repository, then compares them. Every failure on the way (missing
file, network error, timeout, non-2xx status) degrades to a safe answer:
an unknown latest version counts as up to date so users never get a false
"update available" alarm.

Typical usage::

    checker = VersionChecker(Config.from_env())
    info = await checker.check()
    print(info.up_to_date)
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field

from theme_wizard.config import Config
from theme_wizard.utils import print_warning

UNKNOWN_VERSION = "0.0.0"


class VersionInfo(BaseModel):
    """Body of ``GET /api/admin/version``."""

    model_config = ConfigDict(populate_by_name=True)

    installed: str
    latest: str
    up_to_date: bool = Field(alias="upToDate")
    changelog: str


def _version_parts(version: str) -> list[int]:
    parts = []
    for piece in version.strip().split("."):
        try:
            parts.append(int(piece))
        except ValueError:
            parts.append(0)
    return parts


def compare_versions(a: str, b: str) -> int:
    """Compare two ``major.minor.patch`` strings.

    Missing components count as zero and non-numeric ones as zero too.

    Returns:
        A negative number if *a* < *b*, zero if equal, positive if *a* > *b*.

    Examples::

        compare_versions("1.2", "1.2.0")  -> 0
        compare_versions("1.10.0", "1.9") -> 1
    """
    pa = _version_parts(a)
    pb = _version_parts(b)
    for i in range(3):
        diff = (pa[i] if i < len(pa) else 0) - (pb[i] if i < len(pb) else 0)
        if diff != 0:
            return diff
    return 0


class VersionChecker:
    """Async checker behind the version endpoint and the ``version`` command."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    async def installed_version(self) -> str:
        """Return the trimmed contents of the local VERSION file.

        A missing or unreadable file (including one that is not UTF-8) gives
        ``0.0.0``.
        """
        path = Path(self.config.version_file)
        loop = asyncio.get_running_loop()
        try:
            content = await loop.run_in_executor(None, path.read_text, "utf-8")
        except (OSError, UnicodeDecodeError):
            return UNKNOWN_VERSION
        return content.strip()

    async def latest_version(self) -> str | None:
        """Fetch the published VERSION file.

        Returns:
            The version string, or ``None`` if it could not be fetched.
        """
        url = self.config.version_url
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.config.fetch_timeout)) as client:
                response = await client.get(url, headers={"Cache-Control": "no-cache"})
        except httpx.TimeoutException:
            print_warning(
                f"Version check timed out after {self.config.fetch_timeout}s: {url}"
            )
            return None
        except httpx.HTTPError as exc:
            print_warning(f"Version check failed for {url}: {exc}")
            return None

        if not response.is_success:
            print_warning(f"Version check got HTTP {response.status_code} from {url}")
            return None
        return response.text.strip()

    async def check(self) -> VersionInfo:
        """Compare the installed version against the latest published one."""
        installed, latest = await asyncio.gather(
            self.installed_version(),
            self.latest_version(),
        )
        up_to_date = compare_versions(installed, latest) >= 0 if latest else True
        return VersionInfo(
            installed=installed,
            latest=latest or installed,
            up_to_date=up_to_date,
            changelog=self.config.changelog_url,
        )

    def fallback(self) -> VersionInfo:
        """The body returned when the check itself blows up."""
        return VersionInfo(
            installed=UNKNOWN_VERSION,
            latest=UNKNOWN_VERSION,
            up_to_date=True,
            changelog=self.config.changelog_url,
        )
