"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from ts_depgraph import __version__
from ts_depgraph.config import AppConfig, load_config
from ts_depgraph.web.api import router
from ts_depgraph.web.state import state


def create_app(config: AppConfig | None = None) -> FastAPI:
    state.config = config if config is not None else load_config()
    app = FastAPI(title="ts-depgraph", version=__version__)
    app.include_router(router)
    return app
