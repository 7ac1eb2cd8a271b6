"""Default settings for nova."""

from __future__ import annotations

DEFAULT_CONFIG: dict = {
    "store": {
        "path": None,  # None = <nova home>/nova.db
    },
    "editor": {
        "command": None,  # None = $VISUAL, then $EDITOR, then vi
        "temp_suffix": ".temp",
        "keep_temp_on_error": False,
    },
    "logging": {
        "level": "WARNING",
    },
}
