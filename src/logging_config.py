import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Send logs to stderr so stdout only carries the module set."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
