"""
Tính các khung giờ có thể đặt cho một barber trong một ngày.

Giờ ứng viên không phải lưới cố định: gồm mỗi mốc giờ tròn tính từ giờ mở
cửa, cộng thêm giờ kết thúc của mọi appointment trong ngày, để khách có thể
đặt ngay sau khi lịch trước kết thúc.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from barberbook.core.clock import combine, day_of_week, format_minutes
from barberbook.core.config import FREE_STATUSES, SLOT_STEP_MINUTES
from barberbook.core.exceptions import NotFoundError
from barberbook.schemas.appointment_schema import Appointment
from barberbook.schemas.schedule_schema import WorkingSchedule
from barberbook.schemas.service_schema import Service
from barberbook.schemas.time_slot_schema import (
    AvailableSlotsResponse, BookingDay, Slot, SlotVisibility,
)

logger = logging.getLogger(__name__)

# ==================== Predicates ====================

def overlaps(start: int, end: int, apt_start: int, apt_end: int) -> bool:
    """Khung [start, end) có chồng lên appointment [apt_start, apt_end) không (đơn vị phút)

    - start nằm trong appointment
    - end nằm trong (apt_start, apt_end]
    - khung bao trọn appointment
    """
    return (
        (apt_start <= start < apt_end)
        or (apt_start < end <= apt_end)
        or (start <= apt_start and end >= apt_end)
    )


def is_booked(start: int, end: int, appointments: Iterable[Appointment]) -> bool:
    return any(overlaps(start, end, a.start_minutes, a.end_minutes) for a in appointments)


def blocked_by_break(schedule: WorkingSchedule, start: int, end: int) -> bool:
    """Slot có bị giờ nghỉ chặn không.

    Có tolerance: slot chỉ được lấn vào giờ nghỉ nếu bắt đầu trước giờ nghỉ
    và kết thúc trong khoảng break_start + tolerance.
    """
    window = schedule.break_window
    if window is None:
        return False

    break_start, break_end = window
    if not (start < break_end and end > break_start):
        return False

    tolerance = schedule.tolerance_minutes
    if tolerance:
        return start >= break_start or end > break_start + tolerance
    return True


def occupying(appointments: Iterable[Appointment], appointment_date: date) -> List[Appointment]:
    """Chỉ appointment chưa huỷ trong đúng ngày mới chiếm thời gian"""
    return [
        a for a in appointments
        if a.appointment_date == appointment_date and a.status.value not in FREE_STATUSES
    ]


def candidate_times(
    schedule: WorkingSchedule,
    appointments: Iterable[Appointment],
    step: int = SLOT_STEP_MINUTES,
) -> List[int]:
    """Các giờ bắt đầu ứng viên (phút), đã sắp xếp"""
    start, end = schedule.start_minutes, schedule.end_minutes

    candidates = set(range(start, end, step))
    # Giờ kết thúc ngoài [start, end) không bao giờ qua được bước cắt giờ đóng cửa
    for apt in appointments:
        if start <= apt.end_minutes < end:
            candidates.add(apt.end_minutes)

    return sorted(candidates)


def unavailable_reason(
    schedule: Optional[WorkingSchedule],
    appointment_date: date,
    start: int,
    end: int,
    now: datetime,
) -> Optional[str]:
    """Lý do khung [start, end) không đặt được theo lịch làm việc, None nếu hợp lệ.

    Không xét appointment, phần trùng lịch do validate_and_commit kiểm tra.
    """
    if schedule is None or not schedule.is_active:
        return "Barber không làm việc ngày này"
    if schedule.day_of_week != day_of_week(appointment_date):
        return "Barber không làm việc ngày này"
    if start < schedule.start_minutes or end > schedule.end_minutes:
        return "Ngoài giờ làm việc"
    if blocked_by_break(schedule, start, end):
        return "Trùng giờ nghỉ"
    if combine(appointment_date, start) < now:
        return "Giờ đã qua"
    return None

# ==================== Generate Slots ====================

def generate_slots(
    schedule: Optional[WorkingSchedule],
    appointment_date: date,
    service: Service,
    appointments: Iterable[Appointment],
    now: datetime,
    visibility: SlotVisibility = SlotVisibility.show_greyed_out,
) -> List[Slot]:
    """Danh sách slot của một ngày.

    Slot trùng giờ nghỉ luôn bị bỏ. Slot đã có người đặt hoặc đã qua được
    giữ lại với available=False khi show_greyed_out, bị bỏ khi
    hide_unavailable.
    """
    if schedule is None or not schedule.is_active:
        return []
    if schedule.day_of_week != day_of_week(appointment_date):
        return []

    booked = occupying(appointments, appointment_date)
    duration = service.duration_minutes

    slots = []
    for start in candidate_times(schedule, booked):
        end = start + duration

        # Dịch vụ kết thúc sau giờ đóng cửa
        if end > schedule.end_minutes:
            continue

        if blocked_by_break(schedule, start, end):
            continue

        taken = is_booked(start, end, booked)
        past = combine(appointment_date, start) < now
        available = not taken and not past

        if not available and visibility == SlotVisibility.hide_unavailable:
            continue

        slots.append(Slot(time=format_minutes(start), available=available, is_booked=taken))

    return slots


def get_available_slots(
    repository,
    barber_id: str,
    appointment_date: date,
    service_id: str,
    now: datetime,
    visibility: SlotVisibility = SlotVisibility.show_greyed_out,
) -> AvailableSlotsResponse:
    """Đọc lịch + appointment từ database rồi tính slot"""
    service = get_bookable_service(repository, barber_id, service_id)

    schedule = repository.get_schedule(barber_id, day_of_week(appointment_date))
    if schedule is None:
        logger.debug("Barber %s không làm việc ngày %s", barber_id, appointment_date)
        appointments = []
    else:
        appointments = repository.get_appointments(barber_id, appointment_date)

    slots = generate_slots(schedule, appointment_date, service, appointments, now, visibility)

    return AvailableSlotsResponse(
        barber_id=barber_id,
        appointment_date=appointment_date,
        service_id=service_id,
        duration_minutes=service.duration_minutes,
        visibility=visibility,
        slots=slots,
    )


def get_bookable_service(repository, barber_id: str, service_id: str) -> Service:
    service = repository.get_service(service_id)
    if service is None or service.barber_id != barber_id or not service.is_active:
        raise NotFoundError("Không tìm thấy dịch vụ")
    return service

# ==================== Booking Days ====================

def get_booking_days(repository, barber_id: str, week_start: date, today: date) -> List[BookingDay]:
    """7 ngày bắt đầu từ week_start, đánh dấu ngày không đặt được"""
    active_days = {s.day_of_week for s in repository.get_schedules(barber_id, active_only=True)}

    days = []
    for offset in range(7):
        day = week_start + timedelta(days=offset)
        dow = day_of_week(day)

        reason = None
        if day < today:
            reason = "past"
        elif dow not in active_days:
            reason = "closed"

        days.append(BookingDay(date=day, day_of_week=dow, disabled=reason is not None, reason=reason))

    return days
