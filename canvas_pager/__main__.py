import uvicorn

from canvas_pager.config import settings
from canvas_pager.main import app


def main():
    """Serve the API with the configured host and port."""
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
