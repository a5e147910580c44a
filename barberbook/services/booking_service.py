"""
Đặt lịch: kiểm tra lại trùng giờ ngay trước khi insert.

Danh sách slot khách đang xem có thể đã cũ (khách khác hoặc barber vừa đặt
cùng giờ), nên lúc xác nhận luôn đọc lại appointment từ database. Unique
constraint (barber_id, appointment_date, start_time) phía database vẫn là
lớp chặn cuối cùng.
"""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import HTTPException

from barberbook.core.clock import MINUTES_PER_DAY, day_of_week, format_minutes, to_minutes
from barberbook.core.exceptions import NotFoundError, SlotTakenError
from barberbook.schemas.appointment_schema import Appointment
from barberbook.schemas.booking_schema import (
    BarberBookingCreate, BookingCreate, BookingResult, BookingState, PublicBookingCreate,
)
from barberbook.schemas.time_slot_schema import SlotVisibility
from barberbook.services import notification_service
from barberbook.services.time_slot_service import (
    get_available_slots, get_bookable_service, is_booked, occupying, unavailable_reason,
)

logger = logging.getLogger(__name__)

# ==================== Conflict Validation ====================

def validate_and_commit(
    repository,
    barber_id: str,
    appointment_date: date,
    start: int,
    end: int,
    payload: dict,
) -> Appointment:
    """Đọc lại appointment trong ngày, nếu [start, end) còn trống thì insert.

    Raise SlotTakenError nếu khung giờ đã bị chiếm.
    """
    current = occupying(repository.get_appointments(barber_id, appointment_date), appointment_date)

    if is_booked(start, end, current):
        logger.warning(
            "Trùng lịch khi xác nhận: barber=%s date=%s start=%s",
            barber_id, appointment_date, format_minutes(start),
        )
        raise SlotTakenError(barber_id, appointment_date.isoformat(), format_minutes(start))

    record = dict(payload)
    record.update({
        "barber_id": barber_id,
        "appointment_date": appointment_date.isoformat(),
        "start_time": format_minutes(start),
        "end_time": format_minutes(end),
    })
    return repository.insert_appointment(record)


def attempt_booking(
    repository,
    barber_id: str,
    service_id: str,
    appointment_date: date,
    start_time: str,
    now: datetime,
    visibility: SlotVisibility,
    payload: Optional[dict] = None,
) -> BookingResult:
    """Một lần đặt lịch: validating -> committed hoặc rejected.

    Khi rejected, kết quả kèm danh sách slot mới; giờ đã chọn không được
    gửi lại tự động.
    """
    service = get_bookable_service(repository, barber_id, service_id)

    start = to_minutes(start_time)
    end = start + service.duration_minutes
    if end > MINUTES_PER_DAY:
        raise HTTPException(status_code=400, detail="Dịch vụ kết thúc sau nửa đêm")

    schedule = repository.get_schedule(barber_id, day_of_week(appointment_date))
    reason = unavailable_reason(schedule, appointment_date, start, end, now)
    if reason:
        logger.info(
            "Từ chối đặt lịch: barber=%s date=%s start=%s (%s)",
            barber_id, appointment_date, format_minutes(start), reason,
        )
        raise HTTPException(status_code=400, detail=f"Không thể đặt lúc {format_minutes(start)}: {reason}")

    record = dict(payload or {})
    record["service_id"] = service_id

    try:
        appointment = validate_and_commit(repository, barber_id, appointment_date, start, end, record)
    except SlotTakenError:
        refreshed = get_available_slots(
            repository, barber_id, appointment_date, service_id, now, visibility
        )
        return BookingResult(
            state=BookingState.rejected,
            message=notification_service.slot_taken(appointment_date, format_minutes(start)),
            available_slots=refreshed.slots,
        )

    return BookingResult(
        state=BookingState.committed,
        message=notification_service.booking_confirmed(service.name, appointment_date, format_minutes(start)),
        appointment=appointment,
    )

# ==================== Create Booking ====================

def create_client_booking(repository, data: BookingCreate, client_id: str, now: datetime) -> BookingResult:
    """Khách đã đăng nhập đặt lịch, client_id lấy từ phiên đăng nhập"""
    return attempt_booking(
        repository,
        barber_id=data.barber_id,
        service_id=data.service_id,
        appointment_date=data.appointment_date,
        start_time=data.start_time,
        now=now,
        visibility=SlotVisibility.hide_unavailable,
        payload={"client_id": client_id},
    )


def create_barber_booking(repository, barber_id: str, data: BarberBookingCreate, now: datetime) -> BookingResult:
    """Barber tạo lịch cho khách cũ hoặc khách vãng lai"""
    payload = {"created_by": barber_id}
    if data.client_id:
        payload["client_id"] = data.client_id
    if data.client_name:
        payload["client_name"] = data.client_name
    if not data.client_id:
        if data.client_email:
            payload["client_email"] = str(data.client_email)
        if data.client_phone:
            payload["client_phone"] = data.client_phone

    return attempt_booking(
        repository,
        barber_id=barber_id,
        service_id=data.service_id,
        appointment_date=data.appointment_date,
        start_time=data.start_time,
        now=now,
        visibility=SlotVisibility.show_greyed_out,
        payload=payload,
    )


def create_public_booking(repository, slug: str, data: PublicBookingCreate, now: datetime) -> BookingResult:
    """Đặt lịch qua link công khai của barber"""
    barber = repository.get_barber_by_slug(slug)
    if barber is None:
        raise NotFoundError("Không tìm thấy barber")

    notes = f"Email: {data.client_email}"
    if data.client_phone:
        notes += f", Tel: {data.client_phone}"

    payload = {
        "client_name": data.client_name,
        "client_email": str(data.client_email),
        "client_phone": data.client_phone,
        "notes": notes,
    }

    return attempt_booking(
        repository,
        barber_id=barber.id,
        service_id=data.service_id,
        appointment_date=data.appointment_date,
        start_time=data.start_time,
        now=now,
        visibility=SlotVisibility.hide_unavailable,
        payload=payload,
    )
