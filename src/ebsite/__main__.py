"""eb-inmobiliaria entrypoint.

Run with:
  python -m ebsite
"""

import logging
import os

import uvicorn

from ebsite.config import Settings, env_bool


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.getenv("EB_HOST", "0.0.0.0")
    port = int(os.getenv("EB_PORT", "8000"))
    reload = env_bool("EB_RELOAD")
    uvicorn.run("ebsite.app:create_app", factory=True, host=host, port=port, reload=reload)

if __name__ == "__main__":
    main()
