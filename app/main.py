import uvicorn

from app.api.app import create_app
from app.config.settings import Settings
from app.database.connection import Database
from app.logging.logger import Log
from app.processor.processor import build_processor


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    database = Database.from_settings(settings)

    try:
        processor = build_processor(settings, database)
        app = create_app(processor)
        Log.info(f"Rate ingestion API listening on {settings.http_host}:{settings.http_port}")
        uvicorn.run(app, host=settings.http_host, port=settings.http_port, log_config=None)
    finally:
        database.close()


if __name__ == "__main__":
    main()
