from fastapi import APIRouter, Depends

from barberbook.dependencies.current_user import get_current_barber, require_owner
from barberbook.dependencies.providers import get_repository
from barberbook.schemas.schedule_schema import WeeklyScheduleUpdate
from barberbook.services import schedule_service

router = APIRouter(prefix="/schedules", tags=["Schedules"])

# ==================== Read ====================

@router.get("/{barber_id}")
def get_weekly_schedule(barber_id: str, repository=Depends(get_repository)):
    """
    Lịch làm việc 7 ngày của barber
    - Ngày chưa cấu hình trả về giá trị mặc định
    """
    return schedule_service.get_weekly_schedule(repository, barber_id)

# ==================== Update ====================

@router.put("/{barber_id}")
def replace_weekly_schedule(
    barber_id: str,
    data: WeeklyScheduleUpdate,
    barber=Depends(get_current_barber),
    repository=Depends(get_repository),
):
    """
    Thay toàn bộ lịch làm việc (xoá hết rồi tạo lại 7 ngày)
    - Yêu cầu đăng nhập bằng chính barber đó
    """
    require_owner(barber_id, barber)
    return schedule_service.replace_weekly_schedule(repository, barber_id, data)
