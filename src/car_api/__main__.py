"""Run the car API with uvicorn."""

import uvicorn

from car_api.config import settings


def main() -> None:
    uvicorn.run(
        "car_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
