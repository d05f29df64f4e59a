"""Run the API with uvicorn: python -m recipebox"""

import uvicorn

from recipebox.config import settings


def main() -> None:
    uvicorn.run(
        "recipebox.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
