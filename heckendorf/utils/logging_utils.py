import logging
import sys
from typing import Union

import structlog
from structlog.stdlib import add_log_level, add_logger_name


def parse_log_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def setup_logging(level: Union[int, str] = logging.INFO, colors: bool = True) -> None:
    """Route structlog through stdlib logging on stderr at ``level``.

    Stdout is left free for rendered maps.
    """
    if isinstance(level, str):
        level = parse_log_level(level)
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
