"""A small HTTP server for previewing the generated site."""

from __future__ import annotations

from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path

_NOT_FOUND = b"404 Not Found"

_CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
}


def resolve_path(url: str, root: str | Path = "docs") -> Path:
    """Map a request URL onto a file below *root*; the bare root maps to index.html."""
    relative = url.lstrip("/")
    if not relative:
        return Path(root) / "index.html"
    return Path(root) / relative


def content_type_for(path: str | Path) -> str | None:
    """The Content-Type for *path*, or None for types that are not recognised."""
    name = str(path)
    for suffix, content_type in _CONTENT_TYPES.items():
        if name.endswith(suffix):
            return content_type
    return None


class _SiteServer(HTTPServer):
    def __init__(self, address: tuple[str, int], root: Path) -> None:
        self.root = root
        super().__init__(address, SiteRequestHandler)


class SiteRequestHandler(BaseHTTPRequestHandler):
    """Serves files from the server's root directory."""

    def _respond(self, include_body: bool) -> None:
        path = resolve_path(self.path, self.server.root)
        contents = None
        if path.is_file():
            try:
                contents = path.read_bytes()
            except OSError:
                contents = None
        if contents is None:
            self._send(404, _NOT_FOUND, "text/plain; charset=UTF-8", include_body)
        else:
            self._send(200, contents, content_type_for(path), include_body)

    def _send(
        self, status: int, body: bytes, content_type: str | None, include_body: bool
    ) -> None:
        self.send_response(status)
        if content_type is not None:
            self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def do_GET(self) -> None:
        self._respond(include_body=True)

    def do_HEAD(self) -> None:
        self._respond(include_body=False)

    do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = do_GET

    def log_message(self, format: str, *args: object) -> None:
        pass


def make_server(port: int = 8464, root: str | Path = "docs") -> HTTPServer:
    """Create a server bound to all interfaces on *port*, serving *root*."""
    return _SiteServer(("0.0.0.0", port), Path(root))


def start_server(port: int = 8464, root: str | Path = "docs") -> None:
    """Serve *root* on *port* until interrupted."""
    with make_server(port, root) as server:
        print(f"Serving at http://0.0.0.0:{port}")
        server.serve_forever()