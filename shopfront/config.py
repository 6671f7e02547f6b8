# shopfront/config.py
import logging
import os

from pydantic import BaseModel
from rich.logging import RichHandler


class Settings(BaseModel):
    product_url: str = "http://localhost:8000"
    order_url: str = "http://localhost:8001"
    timeout: float = 10.0
    notice_ttl: float = 5.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        values = {
            "product_url": os.getenv("SHOPFRONT_PRODUCT_URL"),
            "order_url": os.getenv("SHOPFRONT_ORDER_URL"),
            "timeout": os.getenv("SHOPFRONT_TIMEOUT"),
            "notice_ttl": os.getenv("SHOPFRONT_NOTICE_TTL"),
            "log_level": os.getenv("SHOPFRONT_LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in values.items() if v})


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
