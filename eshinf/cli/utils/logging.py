import logging
import sys


logger = logging.getLogger("eshinf")


def configure_logging(debug: bool):
    """
    Send eshinf log messages to stderr, at DEBUG level when ``debug`` is set.

    Reports are written to stdout, so log lines never mix into JSON or YAML output.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
