from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from barberbook.dependencies.current_user import get_current_barber, get_current_user
from barberbook.dependencies.providers import get_now, get_repository
from barberbook.schemas.booking_schema import BarberBookingCreate, BookingCreate, BookingResult, BookingState
from barberbook.services import booking_service

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def booking_response(result: BookingResult):
    """Bị từ chối vì trùng giờ -> 409 kèm danh sách slot mới"""
    if result.state == BookingState.rejected:
        return JSONResponse(status_code=409, content=result.model_dump(mode="json"))
    return result

# ==================== Create ====================

@router.post("/", status_code=201)
def create_booking(
    data: BookingCreate,
    current_user=Depends(get_current_user),
    repository=Depends(get_repository),
    now: datetime = Depends(get_now),
):
    """
    Khách đặt lịch
    - Kiểm tra lại trùng giờ ngay trước khi lưu
    - Nếu trùng: 409 và danh sách slot mới để chọn lại
    - Ngoài giờ làm việc, trùng giờ nghỉ hoặc giờ đã qua: 400
    - Yêu cầu đăng nhập, lịch được tạo cho chính user đang đăng nhập
    """
    return booking_response(
        booking_service.create_client_booking(repository, data, str(current_user.id), now)
    )


@router.post("/barber", status_code=201)
def create_barber_booking(
    data: BarberBookingCreate,
    barber=Depends(get_current_barber),
    repository=Depends(get_repository),
    now: datetime = Depends(get_now),
):
    """
    Barber tạo lịch cho khách cũ hoặc khách vãng lai
    - Slot trả về khi trùng giờ hiển thị cả giờ đã đặt (màu xám)
    - Yêu cầu đăng nhập bằng tài khoản barber
    """
    return booking_response(booking_service.create_barber_booking(repository, barber.id, data, now))
