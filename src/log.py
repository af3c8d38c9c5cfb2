import sys
import logging

logger = logging.getLogger("moderate")

_fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S")


def configure(debug: bool = False, log_file: str | None = None):
    """Attach stdout and optional error-file handlers to the logger."""
    lvl = logging.DEBUG if debug else logging.INFO
    logger.setLevel(lvl)

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler(stream=sys.stdout)
    ch.setLevel(lvl)
    ch.setFormatter(_fmt)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.ERROR)
        fh.setFormatter(_fmt)
        logger.addHandler(fh)

    return logger
