"""Simple launcher for the Map Distance API.

Configures logging from the environment, builds the application and
serves it with uvicorn.
"""

from __future__ import annotations

import uvicorn

from map_distance.api import create_app
from map_distance.config import get_config
from map_distance.logging_setup import configure_logging


def main() -> None:
    config = get_config()
    configure_logging(config.observability)

    print(f"=== {config.title} ===")
    print(f"Listening on http://{config.server.host}:{config.server.port}{config.api.prefix}")

    uvicorn.run(
        create_app(),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
