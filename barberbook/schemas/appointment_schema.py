from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date
from enum import Enum

from barberbook.core.clock import normalize_time, to_minutes

class AppointmentStatus(str, Enum):
    scheduled = "scheduled"
    completed = "completed"
    cancelled = "cancelled"
    no_show = "no_show"

# Response appointment
class Appointment(BaseModel):
    id: Optional[str] = None
    barber_id: Optional[str] = None
    service_id: Optional[str] = None
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    appointment_date: date
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    status: AppointmentStatus = AppointmentStatus.scheduled
    notes: Optional[str] = None
    created_by: Optional[str] = None

    @field_validator('start_time', 'end_time')
    def validate_time_format(cls, v):
        return normalize_time(v)

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    class Config:
        from_attributes = True

# Cập nhật status của appointment
class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus
    notes: Optional[str] = None
