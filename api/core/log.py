import logging


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the root logger for the API process.

    Args:
        level (str): Log level name, e.g. "INFO" or "DEBUG". Unknown names fall back to INFO.

    Returns:
        logging.Logger: The configured root logger
    """

    logger = logging.getLogger()

    logger.handlers.clear()

    handler = logging.StreamHandler()
    formatter = logging.Formatter(fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    return logger
