"""View rendering."""

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from farmstand.core.config import settings


class ViewRenderer:
    """Render named views such as ``products/index`` to HTML responses."""

    def __init__(self, directory: str | None = None):
        self.templates = Jinja2Templates(directory=directory or settings.templates_dir)

    def render(
        self, request: Request, template_name: str, data: dict | None = None
    ) -> HTMLResponse:
        return self.templates.TemplateResponse(
            request, f"{template_name}.html", data or {}
        )


views = ViewRenderer()
