import logging

LOG_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def setup_logger(name, loglvl = logging.INFO):
    logging.basicConfig(level=loglvl, format=LOG_FMT)
    logger = logging.getLogger(name)
    logger.setLevel(loglvl)
    return logger


def quiet_sdk_loggers(level = logging.WARNING):
    # SDK debug logs include full request bodies, i.e. base64 images.
    for name in ("azure", "anthropic", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(level)
