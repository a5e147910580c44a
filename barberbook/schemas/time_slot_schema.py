from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from enum import Enum

# Cách hiển thị slot không đặt được
class SlotVisibility(str, Enum):
    # Barber quản lý lịch: thấy cả slot đã đặt/đã qua (màu xám)
    show_greyed_out = "show_greyed_out"
    # Khách đặt lịch: chỉ thấy slot còn trống
    hide_unavailable = "hide_unavailable"

# Một khung giờ bắt đầu (không lưu vào database)
class Slot(BaseModel):
    time: str  # HH:MM
    available: bool
    is_booked: bool = False

# Response danh sách slot của 1 ngày
class AvailableSlotsResponse(BaseModel):
    barber_id: str
    appointment_date: date
    service_id: str
    duration_minutes: int
    visibility: SlotVisibility
    slots: List[Slot]

# Một ngày trong tuần để chọn khi đặt lịch
class BookingDay(BaseModel):
    date: date
    day_of_week: int
    disabled: bool
    reason: Optional[str] = None
