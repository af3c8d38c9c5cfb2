import os
import argparse

import uvicorn

from api import make_app
from log import configure, logger
from config import load_cfg

DEFAULT_CFG = os.path.join(os.path.dirname(__file__), "..", "config.yaml")


def main(argv=None):
    ap = argparse.ArgumentParser(description="moderate-text server")
    ap.add_argument("--cfg", default=os.getenv("CFG", DEFAULT_CFG))
    ap.add_argument("--host")
    ap.add_argument("--port", type=int)
    ap.add_argument("--debug", action="store_true")
    a = ap.parse_args(argv)

    try:
        cfg = load_cfg(a.cfg)
    except Exception as e:
        configure(debug=a.debug)
        logger.exception(f"failed to load config: {e}")
        raise

    debug = a.debug or bool(cfg.get("debug"))
    configure(debug=debug, log_file=cfg.get("log_file"))
    logger.info(f"debug={debug}")
    logger.info(f"config: {a.cfg}")

    app = make_app(cfg, a.cfg)

    uvicorn.run(
        app,
        host=a.host or cfg["host"],
        port=a.port or int(cfg["port"]),
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
