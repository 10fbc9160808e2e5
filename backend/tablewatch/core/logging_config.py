"""Logging setup shared by the app entrypoint and scripts."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Root handler + format. Noisy client libraries stay at WARNING."""
    logging.basicConfig(level=(level or "INFO").upper(), format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("apscheduler.executors.default").setLevel(logging.WARNING)
