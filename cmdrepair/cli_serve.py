import sys

import uvicorn

from cmdrepair.config.settings import Settings
from cmdrepair.exceptions import ConfigurationError


def main(settings: Settings | None = None) -> int:
    try:
        settings = settings or Settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    uvicorn.run(
        "cmdrepair.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
