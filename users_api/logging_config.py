import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger.

    Does nothing if the root logger already has handlers, so calling it
    again from tests or a second ``create_app`` is harmless.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
