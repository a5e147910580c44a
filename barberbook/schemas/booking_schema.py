from pydantic import BaseModel, EmailStr, field_validator, model_validator
from typing import Optional, List
from datetime import date
from enum import Enum

from barberbook.core.clock import normalize_time
from barberbook.schemas.appointment_schema import Appointment
from barberbook.schemas.time_slot_schema import Slot

def _clean(v):
    if v is None:
        return v
    v = v.strip()
    return v or None

# Khách đã đăng nhập đặt lịch
class BookingCreate(BaseModel):
    barber_id: str  # UUID
    service_id: str
    appointment_date: date
    start_time: str  # HH:MM

    @field_validator('start_time')
    def validate_start_time(cls, v):
        return normalize_time(v)

# Barber tạo lịch cho khách (khách cũ hoặc khách vãng lai)
class BarberBookingCreate(BaseModel):
    service_id: str
    appointment_date: date
    start_time: str  # HH:MM
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[EmailStr] = None
    client_phone: Optional[str] = None

    @field_validator('start_time')
    def validate_start_time(cls, v):
        return normalize_time(v)

    @field_validator('client_name', 'client_phone', mode='before')
    def strip_text(cls, v):
        return _clean(v)

    @model_validator(mode='after')
    def validate_client(self):
        if not self.client_id and not self.client_name:
            raise ValueError('Phải chọn khách hàng hoặc nhập tên khách')
        return self

# Đặt lịch qua trang công khai (không cần đăng nhập)
class PublicBookingCreate(BaseModel):
    service_id: str
    appointment_date: date
    start_time: str  # HH:MM
    client_name: str
    client_email: EmailStr
    client_phone: Optional[str] = None

    @field_validator('start_time')
    def validate_start_time(cls, v):
        return normalize_time(v)

    @field_validator('client_name', 'client_phone', mode='before')
    def strip_text(cls, v):
        return _clean(v)

    @field_validator('client_name')
    def validate_client_name(cls, v):
        if not v:
            raise ValueError('Tên khách hàng là bắt buộc')
        return v

# Trạng thái của một lần đặt lịch
class BookingState(str, Enum):
    selecting = "selecting"
    validating = "validating"
    committed = "committed"
    rejected = "rejected"

# Kết quả đặt lịch
class BookingResult(BaseModel):
    state: BookingState
    message: str
    appointment: Optional[Appointment] = None
    # Khi bị từ chối: danh sách slot mới để chọn lại
    available_slots: Optional[List[Slot]] = None
