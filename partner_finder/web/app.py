"""FastAPI application factory."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from fastapi import FastAPI, Request
from jinja2 import Environment, FileSystemLoader
from starlette.responses import HTMLResponse

from partner_finder.config import AppConfig, load_config
from partner_finder.utils.logging_config import setup_logging

from .search import router as search_router

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"

logger = logging.getLogger("partner_finder.web")


PHOTO_SCHEMES = ("", "http", "https")


def safe_photo_url(url: Optional[str]) -> Optional[str]:
    """Return url if it is a relative or http(s) reference, else None."""
    if not url:
        return None
    url = url.strip()
    if not url or any(ord(ch) < 0x20 or ord(ch) == 0x7f for ch in url):
        return None
    try:
        scheme = urlsplit(url).scheme.lower()
    except ValueError:
        return None
    return url if scheme in PHOTO_SCHEMES else None


def _create_jinja_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
    )
    env.filters["photo_src"] = safe_photo_url
    return env


class _Templates:
    """Thin wrapper that mimics Jinja2Templates from starlette."""

    def __init__(self, config: AppConfig):
        self.env = _create_jinja_env()
        self.config = config

    def TemplateResponse(self, name: str, context: dict, status_code: int = 200):
        template = self.env.get_template(name)
        context.setdefault("max_keywords", self.config.search.max_keywords)
        html = template.render(**context)
        return HTMLResponse(html, status_code=status_code)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or AppConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.log_dir, config.log_level_value)
        yield

    app = FastAPI(title="Partner Finder", lifespan=lifespan)

    app.state.config = config
    app.state.templates = _Templates(config)

    app.include_router(search_router)

    @app.get("/")
    def landing(request: Request):
        return app.state.templates.TemplateResponse("search.html", {
            "request": request,
            "keywords": "",
            "results": None,
        })

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("Web app created (data file: %s)", config.store.data_file)
    return app


app = create_app(load_config(os.environ.get("PARTNER_FINDER_CONFIG")))
