"""In-memory state for the web API: just the active app config."""

from __future__ import annotations

from ts_depgraph.config import AppConfig


class AppState:
    """Holds the config every request builds from. Graphs are never shared."""

    def __init__(self, config: AppConfig | None = None):
        self.config = config or AppConfig()


# Module-level singleton; create_app() replaces its config
state = AppState()
