"""
Development server entry point: ``python -m app``.

Runs a single uvicorn worker. The ledger lives in process memory,
so more than one worker would mean more than one ledger.
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        workers=1,
    )


if __name__ == "__main__":
    main()
