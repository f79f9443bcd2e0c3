"""Process entry point: `python -m users_api` / `users-api`.

uvicorn owns signal handling: on SIGINT/SIGTERM it stops accepting
connections, runs the lifespan shutdown (pool close) and exits 0.
"""

import uvicorn

from users_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
