from barberbook.core.exceptions import NotFoundError
from barberbook.schemas.barbers_schema import BarberProfile, PublicBarberPage


def get_barber_by_slug(repository, slug: str) -> BarberProfile:
    barber = repository.get_barber_by_slug(slug)
    if barber is None:
        raise NotFoundError("Không tìm thấy barber")
    return barber


def get_public_page(repository, slug: str) -> PublicBarberPage:
    """Thông tin barber, dịch vụ đang hoạt động và lịch làm việc cho trang công khai"""
    barber = get_barber_by_slug(repository, slug)

    return PublicBarberPage(
        barber=barber,
        services=repository.list_services(barber.id, active_only=True),
        schedules=repository.get_schedules(barber.id, active_only=True),
    )
