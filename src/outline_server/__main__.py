"""Run the outline API with ``python -m outline_server``."""

import uvicorn

from axaml_outline.utils.logging_config import configure_logging, get_logger, resolve_log_level
from outline_server.server_config import HOST, PORT, RELOAD

logger = get_logger(__name__)


def run() -> None:
    """Serve the API with the host, port and reload flag from the environment."""
    configure_logging(resolve_log_level())
    logger.info("Starting axaml-outline server", extra={"host": HOST, "port": PORT, "reload": RELOAD})
    uvicorn.run("outline_server.main:app", host=HOST, port=PORT, reload=RELOAD, log_config=None)


if __name__ == "__main__":
    run()
