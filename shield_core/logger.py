import logging, json, sys, time, os


def get_logger(name="shield", level=None, to_file=None):
    """Unified structured logger for all shield_core components.

    Level and file default to SHIELD_LOG_LEVEL / SHIELD_LOG_FILE.
    Callers must only ever log masked key hashes.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv("SHIELD_LOG_LEVEL", "INFO").upper()
    try:
        logger.setLevel(level)
    except (TypeError, ValueError):
        # unknown level name in env or args
        logger.setLevel(logging.INFO)
    to_file = to_file or os.getenv("SHIELD_LOG_FILE")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # Use UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
