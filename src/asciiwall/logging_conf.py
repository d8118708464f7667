import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    http_level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("urllib3").setLevel(http_level)
    logging.getLogger("requests").setLevel(http_level)
