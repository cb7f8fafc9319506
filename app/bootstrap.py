import logging
from dataclasses import dataclass

from app.config import Settings
from logic.service_desk import ServiceDesk


@dataclass
class AppContext:
    settings: Settings
    desk: ServiceDesk


def build_app(settings: Settings) -> AppContext:
    logging.info("Service desk initializing")

    desk = ServiceDesk(settings.max_size)
    logging.info(f"Service desk ready: max_size={desk.max_size}")

    return AppContext(settings=settings, desk=desk)
