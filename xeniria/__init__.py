"""Site configuration, Markdown posts and pages with front matter, and a local preview server."""

__version__ = "0.2.0"