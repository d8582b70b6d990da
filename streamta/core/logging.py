"""streamta.core.logging

Logging setup for applications embedding streamta.

Library modules only call ``logging.getLogger(__name__)`` and log snake_case
event names with ``extra`` fields. ``configure_logging`` attaches a single
handler to the ``streamta`` logger.
"""

from __future__ import annotations

import json
import logging

from streamta.core.config import LoggingConfig

_STD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: event, logger, level plus any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k not in _STD_ATTRS:
                payload[k] = v
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, sort_keys=True)


def configure_logging(cfg: LoggingConfig | None = None) -> logging.Logger:
    cfg = cfg or LoggingConfig()
    root = logging.getLogger("streamta")
    root.setLevel(cfg.level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    if cfg.json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
    return root
