import uvicorn

from app import create_app
from app.core.config import settings
from app.core.logging import setup_logging

setup_logging(settings.LOG_LEVEL, fmt=settings.LOG_FORMAT, service=settings.APP_NAME)
app = create_app(settings)


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
