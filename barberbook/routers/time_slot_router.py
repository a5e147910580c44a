from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from barberbook.dependencies.providers import get_now, get_repository
from barberbook.schemas.time_slot_schema import SlotVisibility
from barberbook.services import time_slot_service

router = APIRouter(prefix="/time-slots", tags=["Time Slots"])

# ==================== Read ====================

@router.get("/barber/{barber_id}")
def get_barber_slots(
    barber_id: str,
    appointment_date: date = Query(..., description="Format: YYYY-MM-DD"),
    service_id: str = Query(...),
    visibility: SlotVisibility = Query(SlotVisibility.hide_unavailable),
    repository=Depends(get_repository),
    now: datetime = Depends(get_now),
):
    """
    Tính các khung giờ của barber cho 1 ngày và 1 dịch vụ
    - hide_unavailable: chỉ trả về slot còn trống (khách đặt lịch)
    - show_greyed_out: trả cả slot đã đặt/đã qua với available = false (barber)
    """
    return time_slot_service.get_available_slots(
        repository, barber_id, appointment_date, service_id, now, visibility
    )


@router.get("/barber/{barber_id}/days")
def get_booking_days(
    barber_id: str,
    week_start: Optional[date] = Query(None, description="Format: YYYY-MM-DD, mặc định hôm nay"),
    repository=Depends(get_repository),
    now: datetime = Depends(get_now),
):
    """
    7 ngày để chọn khi đặt lịch
    - disabled = true nếu ngày đã qua hoặc barber không làm việc
    """
    today = now.date()
    return time_slot_service.get_booking_days(repository, barber_id, week_start or today, today)
