"""Remote skill download over HTTP (aiohttp).

GitHub page URLs are rewritten to raw.githubusercontent.com URLs:

    github.com/o/r/blob/main/x/SKILL.md  -> raw.../o/r/main/x/SKILL.md
    github.com/o/r/tree/main/x           -> raw.../o/r/main/x/SKILL.md
    github.com/o/r                       -> first of SKILL.md, skill/SKILL.md,
                                            skills/SKILL.md, README.md on the
                                            repo's default branch
"""

from __future__ import annotations

import asyncio
import json
import logging
import re

import aiohttp

from vaultcmd.errors import SkillFetchError, SkillNotFoundError

logger = logging.getLogger(__name__)

RAW_HOST = "raw.githubusercontent.com"
API_BASE = "https://api.github.com"

_REPO_RE = re.compile(r"github\.com/([^/]+)/([^/?#]+)")

REPO_CANDIDATES = ("SKILL.md", "skill/SKILL.md", "skills/SKILL.md", "README.md")


def resolve_raw_url(url: str) -> str | None:
    """Map a GitHub blob/tree URL to its raw form.

    Returns the URL unchanged for non-GitHub and raw URLs, and None for a
    bare repository URL (which needs a network search).
    """
    if "github.com" not in url or RAW_HOST in url:
        return url
    if "/blob/" in url:
        return url.replace("github.com", RAW_HOST, 1).replace("/blob/", "/", 1)
    if "/tree/" in url:
        raw = url.replace("github.com", RAW_HOST, 1).replace("/tree/", "/", 1)
        if not raw.lower().endswith(".md"):
            raw = raw.rstrip("/") + "/SKILL.md"
        return raw
    return None


def parse_repo(url: str) -> tuple[str, str] | None:
    match = _REPO_RE.search(url)
    if not match:
        return None
    owner, repo = match.groups()
    return owner, re.sub(r"\.git$", "", repo)


class SkillFetcher:
    """Fetch skill text by URL."""

    def __init__(self, timeout: float = 30, user_agent: str = "vaultcmd") -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {"User-Agent": user_agent}

    async def _get(self, url: str) -> tuple[int, str]:
        """GET url → (status, body). Transport failures raise SkillFetchError."""
        try:
            async with aiohttp.ClientSession(timeout=self._timeout, headers=self._headers) as session:
                async with session.get(url) as resp:
                    return resp.status, await resp.text()
        except asyncio.TimeoutError as exc:
            raise SkillFetchError(f"Timed out fetching {url}", url=url) from exc
        except aiohttp.ClientError as exc:
            raise SkillFetchError(f"Network error fetching {url}: {exc}", url=url) from exc
        except UnicodeDecodeError as exc:
            raise SkillFetchError(f"Response from {url} is not text: {exc}", url=url) from exc

    async def fetch_text(self, url: str) -> str:
        status, body = await self._get(url)
        if status == 404:
            raise SkillNotFoundError(f"Skill not found at {url}")
        if status != 200:
            raise SkillFetchError(
                f"Failed to download skill (status {status}). Please check the URL.",
                url=url,
                status=status,
            )
        return body

    async def url_exists(self, url: str) -> bool:
        try:
            status, _ = await self._get(url)
        except SkillFetchError:
            return False
        return status == 200

    async def default_branch(self, owner: str, repo: str) -> str:
        """Repository default branch; "main" when the API is unavailable."""
        try:
            status, body = await self._get(f"{API_BASE}/repos/{owner}/{repo}")
            if status == 200:
                return json.loads(body).get("default_branch") or "main"
        except (SkillFetchError, ValueError) as exc:
            logger.warning("Failed to fetch default branch, defaulting to main: %s", exc)
        return "main"

    async def find_skill_in_repo(self, repo_url: str) -> str | None:
        parsed = parse_repo(repo_url)
        if not parsed:
            return None
        owner, repo = parsed
        branch = await self.default_branch(owner, repo)
        for candidate in REPO_CANDIDATES:
            url = f"https://{RAW_HOST}/{owner}/{repo}/{branch}/{candidate}"
            if await self.url_exists(url):
                return url
        return None

    async def resolve(self, url: str) -> str:
        """Turn any supported skill URL into a fetchable raw URL."""
        raw = resolve_raw_url(url)
        if raw is not None:
            return raw
        logger.info("Searching for SKILL.md in %s", url)
        found = await self.find_skill_in_repo(url)
        if not found:
            raise SkillNotFoundError(
                "Could not find SKILL.md in the repository. Provide a direct link "
                "to the SKILL.md file or check the default branch."
            )
        return found
