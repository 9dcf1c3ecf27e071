import io
from unittest import mock

import pytest
import requests
from PIL import Image

from xeniria.markdown import (
    FrontMatterError,
    Page,
    PageFrontMatter,
    estimate_reading_time,
    parse_page_markdown,
    parse_post_markdown,
    render_markdown,
    rewrite_images,
    split_front_matter,
)

POST = """---
title: My First Post
date: 2025-01-30
author: Jane Doe
---
Hello world

```rust
fn main() {}
```
"""


def _png_bytes(width, height):
    buffer = io.BytesIO()
    Image.new("RGB", (width, height)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def docs_dir(tmp_path):
    docs = tmp_path / "docs"
    (docs / "images").mkdir(parents=True)
    (docs / "images" / "a.png").write_bytes(_png_bytes(30, 20))
    return docs


def test_split_front_matter():
    yaml_text, body = split_front_matter("---\ntitle: T\n---\nBody\n")
    assert yaml_text == "title: T"
    assert body == "Body\n"


def test_split_front_matter_missing_opening():
    with pytest.raises(FrontMatterError, match="Missing front matter"):
        split_front_matter("no front matter here")


def test_split_front_matter_missing_body():
    with pytest.raises(FrontMatterError, match="Missing Markdown body"):
        split_front_matter("---\ntitle: T\n")


def test_render_markdown_marks_code_blocks():
    html = render_markdown("```rust\nfn main() {}\n```\n")
    assert '<pre class="line-numbers"><code class="language-rust">' in html
    assert "<pre><code" not in html


def test_render_markdown_passes_raw_html():
    html = render_markdown("<div class='x'>hi</div>\n")
    assert "<div class='x'>hi</div>" in html


def test_reading_time_rounds_up():
    assert estimate_reading_time("") == 0
    assert estimate_reading_time("word " * 200) == 1
    assert estimate_reading_time("word " * 201) == 2


def test_rewrite_local_image(docs_dir):
    html = '<p><img src="../images/a.png" alt="A" /></p>'
    result = rewrite_images(html, docs_dir)
    assert result == (
        "<p><div class='shimmer aspect-ratio' style='--aspect-ratio:30 / 20'>"
        '<img src="../images/a.png" alt="A"/></div></p>'
    )


def test_rewrite_missing_local_image_is_dropped(docs_dir):
    result = rewrite_images('<p><img src="nope.png" alt="x" /></p>', docs_dir)
    assert result == "<p></p>"


def test_rewrite_unreadable_local_image_has_zero_size(docs_dir):
    (docs_dir / "broken.png").write_bytes(b"not an image")
    result = rewrite_images('<img src="broken.png" alt="b" />', docs_dir)
    assert "--aspect-ratio:0 / 0" in result
    assert 'src="broken.png"' in result


def test_rewrite_remote_image(docs_dir):
    response = mock.MagicMock(status_code=200, content=_png_bytes(40, 10))
    with mock.patch("xeniria.markdown.requests.get", return_value=response) as get:
        result = rewrite_images('<img src="https://img.example.com/a.png" alt="r" />', docs_dir)
    assert "--aspect-ratio:40 / 10" in result
    assert get.call_args.args[0] == "https://img.example.com/a.png"


def test_rewrite_remote_failure_is_dropped(docs_dir):
    with mock.patch(
        "xeniria.markdown.requests.get", side_effect=requests.ConnectionError("down")
    ):
        result = rewrite_images('x<img src="https://img.example.com/a.png" alt="r" />y', docs_dir)
    assert result == "xy"


def test_rewrite_remote_bad_status_is_dropped(docs_dir):
    response = mock.MagicMock(status_code=404, content=_png_bytes(4, 4))
    with mock.patch("xeniria.markdown.requests.get", return_value=response):
        result = rewrite_images('<img src="https://img.example.com/a.png" alt="r" />', docs_dir)
    assert result == ""


def test_parse_post_markdown(tmp_path, docs_dir):
    path = tmp_path / "post.md"
    path.write_text(POST, encoding="utf-8")
    post = parse_post_markdown(path, docs_dir)
    assert post.front_matter.title == "My First Post"
    assert post.front_matter.date == "2025-01-30"
    assert post.front_matter.author == "Jane Doe"
    assert post.front_matter.description is None
    assert post.file_name == "docs/posts/my-first-post.html"
    assert post.reading_time == 1
    assert '<pre class="line-numbers"><code class="language-rust">' in post.content


def test_parse_post_missing_field(tmp_path):
    path = tmp_path / "post.md"
    path.write_text("---\ntitle: T\nauthor: A\n---\nbody\n", encoding="utf-8")
    with pytest.raises(FrontMatterError, match="date"):
        parse_post_markdown(path)


def test_parse_post_invalid_yaml(tmp_path):
    path = tmp_path / "post.md"
    path.write_text("---\ntitle: [unclosed\n---\nbody\n", encoding="utf-8")
    with pytest.raises(FrontMatterError):
        parse_post_markdown(path)


def test_parse_page_markdown_with_image(tmp_path, docs_dir):
    path = tmp_path / "about.md"
    path.write_text(
        "---\ntitle: About\nauthor: Jane Doe\ndescription: Who I am\n---\n"
        "![Me](../images/a.png)\n",
        encoding="utf-8",
    )
    page = parse_page_markdown(path, docs_dir)
    assert page.front_matter == PageFrontMatter(
        title="About", author="Jane Doe", description="Who I am"
    )
    assert isinstance(page, Page)
    assert "--aspect-ratio:30 / 20" in page.content


def test_parse_page_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_page_markdown(tmp_path / "missing.md")