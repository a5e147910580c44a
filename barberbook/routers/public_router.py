from datetime import date, datetime

from fastapi import APIRouter, Depends, Query

from barberbook.dependencies.providers import get_now, get_repository
from barberbook.routers.booking_router import booking_response
from barberbook.schemas.booking_schema import PublicBookingCreate
from barberbook.schemas.time_slot_schema import SlotVisibility
from barberbook.services import barbers_service, booking_service, time_slot_service

router = APIRouter(prefix="/public", tags=["Public Booking"])

# ==================== Read ====================

@router.get("/{slug}")
def get_public_page(slug: str, repository=Depends(get_repository)):
    """
    Trang đặt lịch công khai của barber
    - Thông tin barber, dịch vụ và lịch làm việc
    - Không cần đăng nhập
    """
    return barbers_service.get_public_page(repository, slug)


@router.get("/{slug}/slots")
def get_public_slots(
    slug: str,
    appointment_date: date = Query(..., description="Format: YYYY-MM-DD"),
    service_id: str = Query(...),
    repository=Depends(get_repository),
    now: datetime = Depends(get_now),
):
    """
    Các khung giờ còn trống (không hiển thị giờ đã đặt hoặc đã qua)
    - Không cần đăng nhập
    """
    barber = barbers_service.get_barber_by_slug(repository, slug)
    return time_slot_service.get_available_slots(
        repository, barber.id, appointment_date, service_id, now, SlotVisibility.hide_unavailable
    )

# ==================== Create ====================

@router.post("/{slug}/bookings", status_code=201)
def create_public_booking(
    slug: str,
    data: PublicBookingCreate,
    repository=Depends(get_repository),
    now: datetime = Depends(get_now),
):
    """
    Đặt lịch không cần tài khoản
    - Bắt buộc tên và email
    - Nếu trùng giờ: 409 và danh sách slot mới
    """
    return booking_response(booking_service.create_public_booking(repository, slug, data, now))
