"""Backend entrypoint. Starts uvicorn with host and port from settings (HOST/PORT env vars)."""
import uvicorn

from riskas.config.settings import get_settings
from riskas.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
