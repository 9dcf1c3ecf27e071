# xeniria

Building blocks for a personal Markdown blog:

- `xeniria.config` reads the site configuration from `config.toml`.
- `xeniria.markdown` parses Markdown files that carry YAML front matter into
  posts and pages, renders them to HTML, and sizes their images.
- `xeniria.server` is a small HTTP server for previewing a generated site
  from a directory such as `docs/`.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Configuration

`xeniria.config.load_config(path="config.toml")` reads a TOML file and
returns a frozen `SiteConfig` with three parts: `site` (`SiteInfo`),
`links` (`Links`) and `analytics` (`Analytics`).
`parse_config(text)` does the same for TOML text, and
`SiteConfig.from_dict(data)` for an already parsed document.

```toml
[site]
title = "My Blog"
description = "Notes on things I build"
author = "Jane Doe"
author_glitch_effect = false
profile_picture = "assets/profile.png"
base_url = "https://blog.example.com"
# og_image = "assets/og.png"   # optional

[links]
github = "https://github.example.com/jane"
twitter = "https://twitter.example.com/jane"

[analytics]
plausible_domain = ""
cloudflare_beacon_token = ""
```

Every field except `site.og_image` is required. If a table or field is
missing, or a value has the wrong type, parsing raises `ValueError`. Invalid
TOML raises `tomllib.TOMLDecodeError`, which is also a `ValueError`.

## Posts and pages

A document begins with front matter between `---` lines:

```markdown
---
title: "My Post"
date: "2025-01-30"
author: "Jane Doe"
description: "Optional summary"
---

# Hello

Body text in Markdown.
```

```python
from xeniria.markdown import parse_post_markdown, parse_page_markdown

post = parse_post_markdown("content/my-post.md", docs_dir="docs")
post.front_matter.title   # "My Post"
post.content              # rendered HTML
post.reading_time         # minutes at 200 words a minute, rounded up
post.file_name            # "docs/posts/my-post.html"

page = parse_page_markdown("content/about.md")
```

- A post needs `title`, `date` and `author`, and may have `description`.
  A page (`PageFrontMatter`) has the same fields without `date`. If the
  date is written as an unquoted YAML date, it becomes an ISO
  `YYYY-MM-DD` string.
- `post.file_name` is always `docs/posts/<slug of the title>.html`.
- If the front matter is missing, is not a mapping, is invalid YAML, or
  lacks a required field, parsing raises `FrontMatterError`, a subclass of
  `ValueError`.

The steps are also available on their own:

- `split_front_matter(text)` returns `(yaml_text, body)`. It drops anything
  before the first `---` line.
- `render_markdown(body)` renders Markdown. It supports strikethrough,
  footnotes, tables, task lists and definition lists, and it passes raw
  HTML through. A fenced code block with a language gets
  `<pre class="line-numbers">`.
- `estimate_reading_time(body)` returns the number of whole minutes.
- `rewrite_images(html, docs_dir="docs")` wraps each
  `<img src="..." alt="...">` in a
  `<div class='shimmer aspect-ratio' style='--aspect-ratio:W / H'>`
  placeholder.
  - A source that starts with `http` is downloaded, with a 10-second
    timeout.
  - Any other source is read from `docs_dir`, after leading `../` parts are
    removed. A local file that exists but cannot be decoded gets a size of
    `0 / 0`.
  - An image that cannot be fetched or found is removed from the HTML, and
    a notice is printed.

## Preview server

```python
from xeniria.server import start_server

start_server(8464, "docs")   # serves until interrupted
```

- `make_server(port=8464, root="docs")` returns an `HTTPServer` bound to
  all interfaces, which you start yourself. `start_server` creates one and
  runs `serve_forever()`.
- Requests are handled by `SiteRequestHandler`, which relies on two
  helpers:
  - `resolve_path(url, root)` maps `/` to `root/index.html` and any other
    path to the file of that name below `root`.
  - `content_type_for(path)` returns the `Content-Type` for `.html`, `.css`
    and `.js` files, and `None` for any other file.
- Existing files are returned with status 200. Anything else gets
  `404 Not Found`.
- HEAD returns headers only. Other methods are answered like GET.
- The server is meant for local preview only.

## What this package does not do

The package does not write a site. It has no HTML page layout and does not
generate an index, a post list, About or License pages, or `sitemap.xml`.
It also has no command-line program. The pieces above parse the
configuration and the content and serve an existing directory. Turning the
parsed posts and pages into HTML files is left to the caller.