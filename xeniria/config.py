"""Site configuration loaded from ``config.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


def _table(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    if name not in data:
        raise ValueError(f"missing table [{name}]")
    value = data[name]
    if not isinstance(value, Mapping):
        raise ValueError(f"[{name}] must be a table")
    return value


def _field(
    table: Mapping[str, Any],
    section: str,
    key: str,
    kind: type,
    *,
    optional: bool = False,
) -> Any:
    if key not in table:
        if optional:
            return None
        raise ValueError(f"missing field {section}.{key}")
    value = table[key]
    if not isinstance(value, kind):
        raise ValueError(f"field {section}.{key} must be a {kind.__name__}")
    return value


@dataclass(frozen=True)
class SiteInfo:
    """Site metadata: title, description, author and so on."""

    title: str
    description: str
    author: str
    author_glitch_effect: bool
    profile_picture: str
    base_url: str
    og_image: str | None = None


@dataclass(frozen=True)
class Links:
    """External profile links shown in the footer."""

    github: str
    twitter: str


@dataclass(frozen=True)
class Analytics:
    """Analytics settings; empty strings disable a provider."""

    plausible_domain: str
    cloudflare_beacon_token: str


@dataclass(frozen=True)
class SiteConfig:
    """The whole site configuration."""

    site: SiteInfo
    links: Links
    analytics: Analytics

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SiteConfig:
        """Build a configuration from a parsed TOML document."""
        site = _table(data, "site")
        links = _table(data, "links")
        analytics = _table(data, "analytics")
        return cls(
            site=SiteInfo(
                title=_field(site, "site", "title", str),
                description=_field(site, "site", "description", str),
                author=_field(site, "site", "author", str),
                author_glitch_effect=_field(site, "site", "author_glitch_effect", bool),
                profile_picture=_field(site, "site", "profile_picture", str),
                base_url=_field(site, "site", "base_url", str),
                og_image=_field(site, "site", "og_image", str, optional=True),
            ),
            links=Links(
                github=_field(links, "links", "github", str),
                twitter=_field(links, "links", "twitter", str),
            ),
            analytics=Analytics(
                plausible_domain=_field(analytics, "analytics", "plausible_domain", str),
                cloudflare_beacon_token=_field(
                    analytics, "analytics", "cloudflare_beacon_token", str
                ),
            ),
        )


def parse_config(text: str) -> SiteConfig:
    """Parse configuration from TOML text; raises ValueError when invalid."""
    return SiteConfig.from_dict(tomllib.loads(text))


def load_config(path: str | Path = "config.toml") -> SiteConfig:
    """Read and parse the configuration file at *path*."""
    return parse_config(Path(path).read_text(encoding="utf-8"))