import logging
from datetime import date
from typing import List, Optional

from barberbook.core.config import FREE_STATUSES
from barberbook.core.exceptions import NotFoundError
from barberbook.schemas.appointment_schema import Appointment, AppointmentStatus, AppointmentStatusUpdate

logger = logging.getLogger(__name__)

# ==================== Get Appointments ====================

def get_appointments_by_barber(
    repository,
    barber_id: str,
    appointment_date: date,
    include_cancelled: bool = False,
) -> List[Appointment]:
    """Lịch hẹn của barber trong ngày, sắp theo giờ bắt đầu"""
    exclude = () if include_cancelled else FREE_STATUSES
    return repository.get_appointments(barber_id, appointment_date, exclude_status=exclude)


def get_appointment_by_id(repository, appointment_id: str) -> Appointment:
    appointment = repository.get_appointment(appointment_id)
    if appointment is None:
        raise NotFoundError("Không tìm thấy lịch hẹn")
    return appointment

# ==================== Update Appointment ====================

def update_appointment_status(repository, appointment_id: str, data: AppointmentStatusUpdate):
    """Cập nhật status: scheduled, completed, cancelled, no_show"""
    appointment = repository.update_appointment_status(appointment_id, data.status.value, data.notes)
    if appointment is None:
        raise NotFoundError("Không tìm thấy lịch hẹn")

    logger.info("Lịch hẹn %s chuyển sang '%s'", appointment_id, data.status.value)

    return {
        "message": f"Cập nhật trạng thái thành '{data.status.value}' thành công",
        "appointment": appointment,
    }


def cancel_appointment(repository, appointment_id: str, notes: Optional[str] = None):
    """Huỷ lịch hẹn, khung giờ được giải phóng cho người khác đặt"""
    return update_appointment_status(
        repository,
        appointment_id,
        AppointmentStatusUpdate(status=AppointmentStatus.cancelled, notes=notes),
    )
