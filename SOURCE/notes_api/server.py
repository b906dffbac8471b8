"""
Entry-point to run the Flask development server.
"""

from __future__ import annotations

import logging

from .app import create_app
from .config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    app.run(port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
