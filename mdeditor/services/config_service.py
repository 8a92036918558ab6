from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from mdeditor.services.change_channel import DEFAULT_PLUGIN_DIR

RENDER_STYLES = ("plain", "highlight")


@dataclass
class EditorConfig:
    plugin_dir: str = DEFAULT_PLUGIN_DIR
    observer_timeout: float = 0.5
    render_style: str = "plain"
    log_level: str = "WARNING"


def _parse_timeout(raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def load_config(env: Optional[Mapping[str, str]] = None) -> EditorConfig:
    """Build the editor configuration from MDEDITOR_* environment variables.

    Unset or unparsable values fall back to the EditorConfig defaults.
    """
    if env is None:
        env = os.environ
    defaults = EditorConfig()

    plugin_dir = (env.get("MDEDITOR_PLUGIN_DIR") or "").strip() or defaults.plugin_dir
    style = (env.get("MDEDITOR_RENDER_STYLE") or "").strip().lower()
    if style not in RENDER_STYLES:
        style = defaults.render_style
    log_level = (env.get("MDEDITOR_LOG_LEVEL") or "").strip().upper() or defaults.log_level

    return EditorConfig(
        plugin_dir=plugin_dir,
        observer_timeout=_parse_timeout(
            env.get("MDEDITOR_OBSERVER_TIMEOUT"), defaults.observer_timeout
        ),
        render_style=style,
        log_level=log_level,
    )
