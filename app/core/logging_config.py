import logging
import sys

def setup_logging():
    """
    Configure logging for the application.

    Sends records to stdout so container platforms can collect them,
    and keeps SQLAlchemy's engine chatter out of the application log.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Reduce SQLAlchemy noise in logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return logging.getLogger("rems")


# Create global logger instance
logger = setup_logging()
