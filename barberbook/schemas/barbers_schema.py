from typing import Optional, List
from pydantic import BaseModel

from barberbook.schemas.schedule_schema import WorkingSchedule
from barberbook.schemas.service_schema import Service

# Hồ sơ barber hiển thị trên trang đặt lịch công khai
class BarberProfile(BaseModel):
    id: str
    full_name: str
    avatar_url: Optional[str] = None
    public_id: Optional[int] = None
    slug_final: Optional[str] = None

    class Config:
        from_attributes = True

# Toàn bộ dữ liệu trang công khai của barber
class PublicBarberPage(BaseModel):
    barber: BarberProfile
    services: List[Service]
    schedules: List[WorkingSchedule]
