"""Run the numeral API with uvicorn: ``python -m apps.numeral_api``."""

import uvicorn

from apps.numeral_api.main import create_app
from lib.config.numeral_api_loader import load_numeral_api_config
from lib.telemetry.logger import configure_logging, get_logger

log = get_logger("apps.numeral_api")


def main() -> None:
    config = load_numeral_api_config()
    configure_logging(config.log_level)
    log.info("Roman numeral server listening on http://%s:%s", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
