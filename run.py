import logging
import sys

from jsondoc import create_app
from jsondoc.config import Config, DevConfig, ProdConfig
from jsondoc.storage.errors import StoreError


def main() -> int:
    config_class = DevConfig if Config.DEBUG else ProdConfig
    logging.basicConfig(
        level=config_class.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(config_class)
    except StoreError:
        logging.getLogger(__name__).exception("Failed to initialize data file")
        return 1

    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("Starting API server on %s:%s", host, port)
    app.run(host=host, port=port, debug=config_class.DEBUG, threaded=True, use_reloader=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
