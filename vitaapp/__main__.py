"""
Run the VitaApp backend with uvicorn.

Uso:
    python -m vitaapp [--host 0.0.0.0] [--port 4000]
    uvicorn vitaapp.app:create_app --factory --port 4000
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from vitaapp.app import create_app, describe_routes
from vitaapp.core.config import get_settings

logger = logging.getLogger("vitaapp")


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Backend VitaApp")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args(argv)

    app = create_app(settings)
    logger.info("Backend VitaApp avviato su http://localhost:%s", args.port)
    logger.info("Dati letti dalla cartella: %s", settings.data_dir)
    logger.info("API disponibili:")
    for line in describe_routes(app):
        logger.info("   - %s", line)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
