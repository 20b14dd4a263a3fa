import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from lib.utils.validation import ensure

from .yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "config/numeral_api.yaml"
CONFIG_ENV_VAR = "NUMERAL_API_CONFIG"

MESSAGE_LANGUAGES = ("en", "es")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ApiConfig:
    """Typed view over ``numeral_api.yaml``.

    Every key is optional; an absent file or section leaves the defaults
    below in place.  ``fold_case`` is the adapter's case policy: when true,
    ``/r2a`` upper-cases its input before handing it to the codec.
    """

    host: str = "127.0.0.1"
    port: int = 3000
    messages: str = "en"
    fold_case: bool = False
    allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    raw: Dict[str, Any] = field(default_factory=dict)


def load_numeral_api_config(path: Optional[str] = None) -> ApiConfig:
    """Load ``numeral_api.yaml`` and return an :class:`ApiConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML file.  Defaults to the value of
        ``NUMERAL_API_CONFIG`` or ``config/numeral_api.yaml``.  A missing
        file is not an error.
    """

    path = path or os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    raw = load_yaml(path) if Path(path).exists() else {}
    section = raw.get("numeral_api") or {}
    ensure(isinstance(section, dict), f"{path}: numeral_api must be a mapping")
    cors = section.get("cors") or {}
    ensure(isinstance(cors, dict), f"{path}: numeral_api.cors must be a mapping")
    logging_cfg = section.get("logging") or {}
    ensure(isinstance(logging_cfg, dict), f"{path}: numeral_api.logging must be a mapping")

    cfg = ApiConfig(raw=raw)
    cfg.host = str(section.get("host", cfg.host))
    cfg.port = section.get("port", cfg.port)
    cfg.messages = str(section.get("messages", cfg.messages)).lower()
    cfg.fold_case = section.get("fold_case", cfg.fold_case)
    cfg.allow_origins = cors.get("allow_origins", cfg.allow_origins)
    cfg.log_level = str(logging_cfg.get("level", cfg.log_level)).upper()

    ensure(
        isinstance(cfg.port, int) and not isinstance(cfg.port, bool) and 0 < cfg.port < 65536,
        f"{path}: port must be an integer between 1 and 65535",
    )
    ensure(
        cfg.messages in MESSAGE_LANGUAGES,
        f"{path}: messages must be one of {', '.join(MESSAGE_LANGUAGES)}",
    )
    ensure(isinstance(cfg.fold_case, bool), f"{path}: fold_case must be true or false")
    ensure(
        isinstance(cfg.allow_origins, list) and all(isinstance(o, str) for o in cfg.allow_origins),
        f"{path}: cors.allow_origins must be a list of strings",
    )
    ensure(cfg.log_level in LOG_LEVELS, f"{path}: unknown logging level {cfg.log_level}")
    return cfg
