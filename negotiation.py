# negotiation.py

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response

from config import VIEWS_DIR


def wants_json(request: Request) -> bool:
    """True when the client lists application/json among acceptable types."""
    accept = request.headers.get("accept") or ""
    return "application/json" in accept.lower()


def render_view(view: str, status_code: int = 200, views_dir: Path = VIEWS_DIR) -> Response:
    path = views_dir / f"{view}.html"
    if not path.is_file():
        return HTMLResponse(f"<h1>{view}</h1>", status_code=status_code)
    return FileResponse(path, status_code=status_code, media_type="text/html")


class PageResponder:
    """
    Answers the page routes for one deployment-wide mode:
      - "negotiate": JSON when the client asks for it, the HTML view otherwise
      - "static":    always the HTML view; JSON errors only under /api/
    """

    def __init__(self, mode: str = "negotiate", views_dir: Path = VIEWS_DIR):
        self.mode = mode
        self.views_dir = views_dir

    def page(self, request: Request, view: str, data: Any) -> Response:
        if self.mode == "negotiate" and wants_json(request):
            return JSONResponse(data)
        return render_view(view, views_dir=self.views_dir)

    def wants_json_error(self, request: Request) -> bool:
        if self.mode == "negotiate":
            return wants_json(request)
        return request.url.path.startswith("/api/")

    def not_found(self, request: Request) -> Response:
        if self.wants_json_error(request):
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Not Found",
                    "message": "The requested endpoint does not exist",
                    "path": request.url.path,
                },
            )
        return render_view("404", status_code=404, views_dir=self.views_dir)
