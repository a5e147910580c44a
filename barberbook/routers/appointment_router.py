from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from barberbook.dependencies.current_user import get_current_barber, require_owner
from barberbook.dependencies.providers import get_repository
from barberbook.schemas.appointment_schema import AppointmentStatusUpdate
from barberbook.services import appointment_service

router = APIRouter(prefix="/appointments", tags=["Appointments"])

# ==================== Read ====================

@router.get("/barber/{barber_id}")
def get_barber_appointments(
    barber_id: str,
    appointment_date: date = Query(..., description="Format: YYYY-MM-DD"),
    include_cancelled: bool = Query(False),
    barber=Depends(get_current_barber),
    repository=Depends(get_repository),
):
    """
    Lịch hẹn của barber trong 1 ngày
    - Yêu cầu đăng nhập bằng chính barber đó
    """
    require_owner(barber_id, barber)
    return appointment_service.get_appointments_by_barber(
        repository, barber_id, appointment_date, include_cancelled
    )


@router.get("/{appointment_id}")
def get_appointment(
    appointment_id: str,
    barber=Depends(get_current_barber),
    repository=Depends(get_repository),
):
    """
    Lấy thông tin chi tiết 1 lịch hẹn
    - Yêu cầu đăng nhập
    """
    appointment = appointment_service.get_appointment_by_id(repository, appointment_id)
    require_owner(appointment.barber_id, barber)
    return appointment

# ==================== Update ====================

@router.patch("/{appointment_id}/status")
def update_appointment_status(
    appointment_id: str,
    data: AppointmentStatusUpdate,
    barber=Depends(get_current_barber),
    repository=Depends(get_repository),
):
    """
    Cập nhật trạng thái lịch hẹn
    - status: scheduled, completed, cancelled, no_show
    - Yêu cầu đăng nhập
    """
    appointment = appointment_service.get_appointment_by_id(repository, appointment_id)
    require_owner(appointment.barber_id, barber)
    return appointment_service.update_appointment_status(repository, appointment_id, data)


@router.patch("/{appointment_id}/cancel")
def cancel_appointment(
    appointment_id: str,
    notes: Optional[str] = Query(None, description="Lý do huỷ"),
    barber=Depends(get_current_barber),
    repository=Depends(get_repository),
):
    """
    Huỷ lịch hẹn
    - Giờ đã huỷ lại hiện là còn trống
    - Yêu cầu đăng nhập
    """
    appointment = appointment_service.get_appointment_by_id(repository, appointment_id)
    require_owner(appointment.barber_id, barber)
    return appointment_service.cancel_appointment(repository, appointment_id, notes)
