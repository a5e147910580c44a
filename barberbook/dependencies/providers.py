from datetime import datetime
from functools import lru_cache

from barberbook.database.booking_repository import BookingRepository


@lru_cache(maxsize=1)
def get_repository() -> BookingRepository:
    return BookingRepository()


def get_now() -> datetime:
    """Giờ hiện tại (naive, giờ địa phương); tests override dependency này"""
    return datetime.now()
