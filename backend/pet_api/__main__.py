"""
Run the QA Pet API with uvicorn.

Usage:
    python -m pet_api

Host, port and log level come from BACKEND_HOST, BACKEND_PORT and LOG_LEVEL
(or a .env file). Defaults are 0.0.0.0, 3000 and INFO.
"""

import uvicorn

from pet_api.config import settings


def main() -> None:
    uvicorn.run(
        "pet_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
