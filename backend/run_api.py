"""Local dev entrypoint for the workshopguard API.

Serves the guard endpoints (form validation, repair status transitions and
workshop or technician capacity) with auto-reload on 127.0.0.1, using the
port and log level from the WORKSHOPGUARD_* environment.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _ensure_src_on_path() -> None:
    backend_dir = Path(__file__).resolve().parent
    src_dir = backend_dir / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


if __name__ == "__main__":
    _ensure_src_on_path()

    import uvicorn

    from workshopguard.config import WorkshopConfig

    config = WorkshopConfig.from_env()
    uvicorn.run(
        "workshopguard.api:app",
        host="127.0.0.1",
        port=config.port,
        reload=True,
        log_level=config.log_level,
    )
