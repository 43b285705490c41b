"""Web API for ts-depgraph (requires the ``web`` extra)."""

from ts_depgraph.web.app import create_app

__all__ = ["create_app"]
