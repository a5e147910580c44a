from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List

from barberbook.core.clock import normalize_time, to_minutes

# Lịch làm việc của barber cho một ngày trong tuần
class WorkingScheduleBase(BaseModel):
    day_of_week: int = Field(..., ge=0, le=6)  # 0 = Chủ nhật
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    is_active: bool = True
    has_break: Optional[bool] = False
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    break_tolerance_enabled: Optional[bool] = False
    break_tolerance_minutes: Optional[int] = Field(0, ge=0)

    @field_validator('start_time', 'end_time', 'break_start', 'break_end')
    def validate_time_format(cls, v):
        if v is None:
            return v
        return normalize_time(v)

    @field_validator('has_break', 'break_tolerance_enabled')
    def default_false(cls, v):
        return bool(v)

    @field_validator('break_tolerance_minutes')
    def default_zero(cls, v):
        return v or 0

    @model_validator(mode='after')
    def validate_ranges(self):
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError('end_time phải lớn hơn start_time')

        if self.has_break:
            if not self.break_start or not self.break_end:
                raise ValueError('Phải có break_start và break_end khi has_break = true')
            if to_minutes(self.break_start) >= to_minutes(self.break_end):
                raise ValueError('break_end phải lớn hơn break_start')
            if (to_minutes(self.break_start) < to_minutes(self.start_time)
                    or to_minutes(self.break_end) > to_minutes(self.end_time)):
                raise ValueError('Giờ nghỉ phải nằm trong giờ làm việc')
        return self

    # Giá trị dạng phút để tính toán slot
    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    @property
    def break_window(self) -> Optional[tuple]:
        """(break_start, break_end) theo phút, hoặc None nếu không nghỉ"""
        if not (self.has_break and self.break_start and self.break_end):
            return None
        return to_minutes(self.break_start), to_minutes(self.break_end)

    @property
    def tolerance_minutes(self) -> int:
        if self.break_tolerance_enabled and self.break_tolerance_minutes > 0:
            return self.break_tolerance_minutes
        return 0

# Response lịch làm việc
class WorkingSchedule(WorkingScheduleBase):
    id: Optional[str] = None
    barber_id: Optional[str] = None

    class Config:
        from_attributes = True

# Cập nhật toàn bộ lịch tuần (xoá hết rồi tạo lại 7 ngày)
class WeeklyScheduleUpdate(BaseModel):
    days: List[WorkingScheduleBase]

    @field_validator('days')
    def validate_days(cls, v):
        day_numbers = sorted(d.day_of_week for d in v)
        if day_numbers != list(range(7)):
            raise ValueError('Phải gửi đủ 7 ngày (0-6), mỗi ngày một lần')
        return v
