import logging
from typing import List

from barberbook.core.config import DEFAULT_ACTIVE_DAYS, DEFAULT_SCHEDULE
from barberbook.schemas.schedule_schema import WeeklyScheduleUpdate, WorkingSchedule

logger = logging.getLogger(__name__)

# ==================== Get Schedule ====================

def get_weekly_schedule(repository, barber_id: str) -> List[WorkingSchedule]:
    """Lịch 7 ngày của barber, ngày chưa cấu hình dùng giá trị mặc định"""
    existing = {s.day_of_week: s for s in repository.get_schedules(barber_id)}

    week = []
    for day in range(7):
        if day in existing:
            week.append(existing[day])
            continue
        week.append(WorkingSchedule(
            barber_id=barber_id,
            day_of_week=day,
            is_active=day in DEFAULT_ACTIVE_DAYS,
            **DEFAULT_SCHEDULE,
        ))
    return week

# ==================== Replace Schedule ====================

def replace_weekly_schedule(repository, barber_id: str, data: WeeklyScheduleUpdate):
    """Xoá toàn bộ lịch cũ và tạo lại 7 ngày"""
    days = sorted(data.days, key=lambda d: d.day_of_week)
    schedules = repository.replace_schedules(barber_id, days)

    logger.info("Barber %s cập nhật lịch làm việc (%d ngày hoạt động)",
                barber_id, sum(1 for d in days if d.is_active))

    return {
        "message": "Cập nhật lịch làm việc thành công",
        "schedules": schedules,
    }
