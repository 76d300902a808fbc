import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Настройка логирования приложения"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("studio").setLevel(level.upper())
