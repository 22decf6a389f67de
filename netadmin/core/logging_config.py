import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stdout handler.

    Args:
        level: Log level name (INFO, DEBUG, etc.). Unknown names fall back to INFO.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    root = logging.getLogger()
    resolved = logging.getLevelName((level or "INFO").upper())
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
