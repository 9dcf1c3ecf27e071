"""Markdown pages and posts with YAML front matter."""

from __future__ import annotations

import datetime
import io
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import mistune
import requests
import yaml
from PIL import Image
from slugify import slugify

_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
_WORDS_PER_MINUTE = 200
_IMG_TAG = re.compile(r'<img\s+[^>]*src="([^"]+)"\s+alt="([^"]*)".*?/?>')
_IMAGE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)

_markdown = mistune.create_markdown(
    escape=False,
    plugins=["strikethrough", "footnotes", "table", "task_lists", "def_list"],
)


class FrontMatterError(ValueError):
    """The front matter of a Markdown file is missing or invalid."""


@dataclass(frozen=True)
class PostFrontMatter:
    """Front matter of a blog post."""

    title: str
    date: str
    author: str
    description: str | None = None


@dataclass(frozen=True)
class PageFrontMatter:
    """Front matter of a standalone page such as About."""

    title: str
    author: str
    description: str | None = None


@dataclass(frozen=True)
class Post:
    """A parsed blog post."""

    front_matter: PostFrontMatter
    content: str
    reading_time: int
    file_name: str


@dataclass(frozen=True)
class Page:
    """A parsed standalone page."""

    front_matter: PageFrontMatter
    content: str


def split_front_matter(text: str) -> tuple[str, str]:
    """Split a document into its YAML front matter and Markdown body."""
    _, sep, rest = text.partition("---\n")
    if not sep:
        raise FrontMatterError("Missing front matter section (--- line not found)")
    front_matter, sep, body = rest.partition("\n---\n")
    if not sep:
        raise FrontMatterError("Missing Markdown body after front matter")
    return front_matter, body


def render_markdown(body: str) -> str:
    """Render Markdown to HTML, marking fenced code blocks for line numbers."""
    html = _markdown(body)
    return html.replace(
        '<pre><code class="language-',
        '<pre class="line-numbers"><code class="language-',
    )


def estimate_reading_time(body: str) -> int:
    """Minutes needed to read *body* at 200 words a minute, rounded up."""
    return math.ceil(len(body.split()) / _WORDS_PER_MINUTE)


def _figure(size: tuple[int, int], src: str, alt: str) -> str:
    width, height = size
    return (
        f"<div class='shimmer aspect-ratio' style='--aspect-ratio:{width} / {height}'>"
        f'<img src="{src}" alt="{alt}"/></div>'
    )


def _remote_image_size(src: str) -> tuple[int, int] | None:
    try:
        response = requests.get(src, headers={"User-Agent": _USER_AGENT}, timeout=10)
    except requests.RequestException:
        return None
    if not 200 <= response.status_code < 300:
        return None
    try:
        with Image.open(io.BytesIO(response.content)) as image:
            image.load()
            return image.size
    except _IMAGE_ERRORS:
        return None


def _local_image_size(root: Path, src: str) -> tuple[int, int] | None:
    cleaned = src
    while cleaned.startswith("../"):
        cleaned = cleaned[3:]
    try:
        with (root / cleaned).open("rb") as handle:
            try:
                with Image.open(handle) as image:
                    return image.size
            except _IMAGE_ERRORS:
                return (0, 0)
    except OSError:
        return None


def rewrite_images(html: str, docs_dir: str | Path = "docs") -> str:
    """Wrap each image in an aspect-ratio box; drop images that cannot be read."""
    root = Path(docs_dir)

    def replace(match: re.Match[str]) -> str:
        src, alt = match.group(1), match.group(2)
        if src.startswith("http"):
            size = _remote_image_size(src)
            if size is None:
                print(
                    f"Could not retrieve or decode remote image '{src}', "
                    "continuing without image"
                )
                return ""
        else:
            size = _local_image_size(root, src)
            if size is None:
                print(f"Could not open local image '{src}', continuing without image")
                return ""
        return _figure(size, src, alt)

    return _IMG_TAG.sub(replace, html)


def _load_front_matter(yaml_text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid YAML front matter: {exc}") from exc
    if not isinstance(data, dict):
        raise FrontMatterError("Front matter must be a mapping")
    return data


def _text_field(data: dict[str, Any], key: str, *, optional: bool = False) -> str | None:
    value = data.get(key)
    if value is None:
        if optional:
            return None
        raise FrontMatterError(f"missing field `{key}`")
    if isinstance(value, str):
        return value
    if isinstance(value, datetime.date):
        return value.isoformat()
    raise FrontMatterError(f"field `{key}` must be a string")


def _read_document(file_path: str | Path) -> tuple[dict[str, Any], str]:
    text = Path(file_path).read_text(encoding="utf-8")
    yaml_text, body = split_front_matter(text)
    return _load_front_matter(yaml_text), body


def parse_post_markdown(file_path: str | Path, docs_dir: str | Path = "docs") -> Post:
    """Parse a blog post file into a :class:`Post`."""
    data, body = _read_document(file_path)
    front_matter = PostFrontMatter(
        title=_text_field(data, "title"),
        date=_text_field(data, "date"),
        author=_text_field(data, "author"),
        description=_text_field(data, "description", optional=True),
    )
    html = render_markdown(body)
    return Post(
        front_matter=front_matter,
        content=rewrite_images(html, docs_dir),
        reading_time=estimate_reading_time(body),
        file_name=f"docs/posts/{slugify(front_matter.title)}.html",
    )


def parse_page_markdown(file_path: str | Path, docs_dir: str | Path = "docs") -> Page:
    """Parse a standalone page file into a :class:`Page`."""
    data, body = _read_document(file_path)
    front_matter = PageFrontMatter(
        title=_text_field(data, "title"),
        author=_text_field(data, "author"),
        description=_text_field(data, "description", optional=True),
    )
    return Page(
        front_matter=front_matter,
        content=rewrite_images(render_markdown(body), docs_dir),
    )