"""Page rendering: Narrative -> HTML via Jinja2 templates.

Templates live in ``templates/`` next to this module. Rendering is pure:
no I/O beyond the template loader.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import jinja2

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def local_clock(timestamp: int | None, utc_offset: int = 0) -> str:
    """Format an epoch timestamp as HH:MM at the observed place."""
    if timestamp is None:
        return "--:--"
    return datetime.fromtimestamp(timestamp + utc_offset, tz=timezone.utc).strftime("%H:%M")


_jinja_env.globals["local_clock"] = local_clock


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
