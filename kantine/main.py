import logging

import uvicorn
from kantine.api.api_run import app
from kantine.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
