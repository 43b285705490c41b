"""Application config: JSON file loading/saving and tsconfig alias discovery."""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ts_depgraph.extractor.imports import strip_comments
from ts_depgraph.models import DEFAULT_EXTENSIONS, DEFAULT_SKIP_DIRS, GraphConfig
from ts_depgraph.resolver.aliases import AliasTable

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEPENDENCY_GRAPH_CONFIG"
DEFAULT_CONFIG_NAME = "config.json"
TSCONFIG_NAME = "tsconfig.json"

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_MAX_EXTENDS_DEPTH = 8


@dataclass
class UISettings:
    node_radius: int = 8
    link_distance: int = 100
    charge_strength: int = -300


@dataclass
class AppConfig:
    port: int = 4000
    default_root_dir: Path = field(default_factory=Path.cwd)
    exclude_patterns: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    show_full_path: bool = True
    path_aliases: dict[str, list[str]] = field(default_factory=dict)
    base_directory: str | None = None
    tsconfig: str | None = None
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    ui: UISettings = field(default_factory=UISettings)

    def to_graph_config(
        self,
        root_dir: str | Path | None = None,
        extra_excludes: Iterable[str] = (),
        show_full_path: bool | None = None,
        verbose: bool = False,
    ) -> GraphConfig:
        """Compile the settings for one build rooted at ``root_dir``.

        Explicit ``path_aliases`` take precedence over a tsconfig. Without
        them, ``tsconfig`` (or ``<root>/tsconfig.json`` when present) supplies
        both the alias table and the base directory.
        """
        root = Path(root_dir) if root_dir else Path(self.default_root_dir)
        root = root.expanduser().resolve()

        aliases = AliasTable()
        base_dir: Path | None = None
        if self.path_aliases:
            aliases = AliasTable.from_mapping(self.path_aliases)
        else:
            tsconfig = Path(self.tsconfig).expanduser() if self.tsconfig else root / TSCONFIG_NAME
            if not tsconfig.is_absolute():
                tsconfig = root / tsconfig
            if self.tsconfig or tsconfig.is_file():
                aliases, base_dir = load_tsconfig_aliases(tsconfig)
        if self.base_directory:
            base_dir = Path(self.base_directory)

        return GraphConfig(
            root_dir=root,
            extensions=list(self.extensions),
            exclude_patterns=list(self.exclude_patterns) + list(extra_excludes),
            include_patterns=list(self.include_patterns),
            show_full_path=self.show_full_path if show_full_path is None else show_full_path,
            path_aliases=aliases,
            base_directory=base_dir,
            skip_dirs=list(self.skip_dirs),
            verbose=verbose,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "port": self.port,
            "defaultRootDir": str(self.default_root_dir),
            "excludePatterns": list(self.exclude_patterns),
            "includePatterns": list(self.include_patterns),
            "extensions": list(self.extensions),
            "showFullPath": self.show_full_path,
            "pathAliases": {k: list(v) for k, v in self.path_aliases.items()},
            "baseDirectory": self.base_directory,
            "tsconfig": self.tsconfig,
            "skipDirs": list(self.skip_dirs),
            "ui": {
                "nodeRadius": self.ui.node_radius,
                "linkDistance": self.ui.link_distance,
                "chargeStrength": self.ui.charge_strength,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """Merge camelCase ``data`` over the defaults.

        Unknown keys are ignored. A value of the wrong type is logged and
        the default is kept for that key.
        """
        config = cls()
        for key, (attr, check) in _FIELDS.items():
            if key not in data or data[key] is None:
                continue
            if check(data[key]):
                setattr(config, attr, data[key])
            else:
                logger.warning("Ignoring config key %r: unexpected value %r", key, data[key])
        config.default_root_dir = Path(config.default_root_dir)

        ui = data.get("ui")
        if not isinstance(ui, dict):
            if ui is not None:
                logger.warning("Ignoring config key 'ui': unexpected value %r", ui)
            ui = {}
        defaults = UISettings()
        values = {}
        for key, attr in _UI_FIELDS.items():
            value = ui.get(key)
            if value is not None and not _is_int(value):
                logger.warning("Ignoring config key 'ui.%s': unexpected value %r", key, value)
                value = None
            values[attr] = getattr(defaults, attr) if value is None else value
        config.ui = UISettings(**values)
        return config


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


_FIELDS = {
    "port": ("port", _is_int),
    "defaultRootDir": ("default_root_dir", lambda v: isinstance(v, str)),
    "excludePatterns": ("exclude_patterns", _is_str_list),
    "includePatterns": ("include_patterns", _is_str_list),
    "extensions": ("extensions", _is_str_list),
    "showFullPath": ("show_full_path", lambda v: isinstance(v, bool)),
    "pathAliases": ("path_aliases", lambda v: isinstance(v, dict)),
    "baseDirectory": ("base_directory", lambda v: isinstance(v, str)),
    "tsconfig": ("tsconfig", lambda v: isinstance(v, str)),
    "skipDirs": ("skip_dirs", _is_str_list),
}

_UI_FIELDS = {
    "nodeRadius": "node_radius",
    "linkDistance": "link_distance",
    "chargeStrength": "charge_strength",
}


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Explicit path, then ``$DEPENDENCY_GRAPH_CONFIG``, then ``./config.json``."""
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load the app config, falling back to defaults on any problem."""
    path = resolve_config_path(config_path)
    if not path.exists():
        logger.info("Config file not found at %s, using defaults", path)
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level value must be an object")
        config = AppConfig.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.error("Error loading config from %s: %s; using defaults", path, e)
        return AppConfig()

    logger.info("Loaded config from %s", path)
    if not config.default_root_dir.is_absolute():
        config.default_root_dir = (path.parent / config.default_root_dir).resolve()
    return config


def save_config(config: AppConfig, config_path: str | Path | None = None) -> Path | None:
    """Write ``config`` as JSON. Errors are logged and None is returned."""
    path = resolve_config_path(config_path)
    try:
        path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        logger.error("Error saving config to %s: %s", path, e)
        return None
    logger.info("Config saved to %s", path)
    return path


def read_jsonc(path: Path) -> Any:
    """Parse JSON that may contain comments and trailing commas (tsconfig style)."""
    text = strip_comments(path.read_text(encoding="utf-8"))
    return json.loads(_TRAILING_COMMA_RE.sub(r"\1", text))


def _compiler_options(path: Path, depth: int = 0) -> tuple[dict[str, Any], Path | None, Path | None]:
    """Return ``(paths, baseUrl dir, paths owner dir)`` following relative ``extends``."""
    data = read_jsonc(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path} is not a JSON object")

    paths: dict[str, Any] = {}
    base_url: Path | None = None
    paths_dir: Path | None = None

    parent = data.get("extends")
    if isinstance(parent, str) and parent.startswith(".") and depth < _MAX_EXTENDS_DEPTH:
        parent_path = (path.parent / parent).resolve()
        if parent_path.suffix != ".json":
            parent_path = parent_path.with_name(parent_path.name + ".json")
        if parent_path.is_file():
            paths, base_url, paths_dir = _compiler_options(parent_path, depth + 1)

    options = data.get("compilerOptions") or {}
    if not isinstance(options, dict):
        raise ValueError(f"compilerOptions in {path} is not an object")
    if isinstance(options.get("baseUrl"), str):
        base_url = (path.parent / options["baseUrl"]).resolve()
    if "paths" in options:
        if not isinstance(options["paths"], dict):
            raise ValueError(f"compilerOptions.paths in {path} is not an object")
        paths = options["paths"]
        paths_dir = path.parent.resolve()
    return paths, base_url, paths_dir


def load_tsconfig_aliases(tsconfig_path: str | Path) -> tuple[AliasTable, Path | None]:
    """Read ``compilerOptions.paths``/``baseUrl`` from a tsconfig.

    Returns the alias table and base directory. A missing or malformed file
    yields an empty table so the build carries on without aliasing.
    """
    path = Path(tsconfig_path)
    try:
        paths, base_url, paths_dir = _compiler_options(path)
        table = AliasTable.from_mapping(paths)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Could not read path aliases from %s: %s", path, e)
        return AliasTable(), None

    base_dir = base_url or (paths_dir if table.entries else None)
    logger.debug("Loaded %d path aliases from %s", len(table), path)
    return table, base_dir
