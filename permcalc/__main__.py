from __future__ import annotations

import logging
import sys
from rich.logging import RichHandler
from typing import Optional, TextIO

from .calculator import PermissionCalculator
from .config import Config, load_config
from .utils import ConfigError, dump_payload

logger: logging.Logger = logging.getLogger()


def render(config: Config, values: list[str]) -> list[str]:
    output = config["output"]
    lines: list[str] = []

    for raw in values:
        value = PermissionCalculator.parse(raw)
        names = PermissionCalculator.get_permissions_from_value(value)
        logging.debug("Resolved %r to %d (%d flags)", raw, value, len(names))

        if output["format"] == "json":
            lines.append(dump_payload({"value": str(value), "permissions": names}))
            continue

        if output["show_value"]:
            lines.append(f"{value}:")
        lines.extend(names)

    return lines


def run(file: str, log_level: str, values: list[str], stream: Optional[TextIO] = None) -> int:
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(log_time_format="[%X]", show_path=False))
    logger.setLevel(getattr(logging, log_level.upper()))

    config = load_config(file)
    logging.info(f"Loaded config from {file}")

    stream = stream or sys.stdout
    for line in render(config, values):
        stream.write(line + "\n")

    return 0


if __name__ == "__main__":
    file: str = sys.argv[1]
    log_level: str = sys.argv[2]

    try:
        sys.exit(run(file, log_level, sys.argv[3:]))
    except ConfigError as e:
        logging.error(str(e))
        sys.exit(1)
