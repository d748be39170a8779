import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the ``docdrop`` logger.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger("docdrop")
    logger.setLevel(level.upper())
    if not any(getattr(handler, "_docdrop", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._docdrop = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
