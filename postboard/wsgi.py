import logging

from postboard import create_app
from postboard.db import db


logger = logging.getLogger(__name__)

app = create_app()


def main():
    try:
        app.run(host=app.config["HOST"], port=app.config["PORT"])
    finally:
        # Drain pooled database connections on shutdown.
        with app.app_context():
            db.engine.dispose()
        logger.info("app_stopped")


if __name__ == "__main__":
    main()
