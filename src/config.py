import os

import yaml

from util import DEFAULT_HOST, DEFAULT_PORT, resolve_path

DEFAULTS = {
    "host": DEFAULT_HOST,
    "port": DEFAULT_PORT,
    "cors_allow_origins": "*",
    "log_file": None,
    "debug": False,
}


def _read_yaml(p):
    if os.path.exists(p):
        with open(p, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}


def load_cfg(path):
    """
    Load the server config from a YAML file

    Missing keys fall back to DEFAULTS; a relative log_file is resolved
    against the directory of the config file.

    :param path: Path to config.yaml, may not exist
    :return: Config dict
    """
    data = _read_yaml(path) if path else {}
    if not isinstance(data, dict):
        raise ValueError(f"config must be a mapping: {path}")
    cfg = dict(DEFAULTS)
    cfg.update(data)
    if cfg.get("log_file"):
        base_dir = os.path.dirname(os.path.abspath(path))
        cfg["log_file"] = resolve_path(cfg["log_file"], base_dir)
    return cfg
