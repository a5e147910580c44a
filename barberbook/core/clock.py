"""
Tiện ích thời gian: chuyển "HH:MM" <-> số phút từ nửa đêm.

Bên trong mọi phép so sánh đều dùng số phút (int); chuỗi "HH:MM"
chỉ xuất hiện ở ranh giới API/database.
"""

from datetime import date, datetime, time, timedelta

MINUTES_PER_DAY = 24 * 60


def to_minutes(value) -> int:
    """Chuyển "HH:MM", "HH:MM:SS" hoặc datetime.time thành số phút từ nửa đêm"""
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = str(value).strip().split(":")
    try:
        if len(parts) not in (2, 3):
            raise ValueError
        hours, minutes = int(parts[0]), int(parts[1])
        total = hours * 60 + minutes
    except ValueError:
        raise ValueError(f"Giờ không hợp lệ: {value!r}, phải có dạng HH:MM")

    if not 0 <= minutes < 60 or not 0 <= total <= MINUTES_PER_DAY:
        raise ValueError(f"Giờ không hợp lệ: {value!r}")
    return total


def format_minutes(minutes: int) -> str:
    """Số phút -> "HH:MM" (24h, có số 0 phía trước)"""
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise ValueError(f"Số phút ngoài phạm vi một ngày: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_time(value) -> str:
    """Chuẩn hoá giờ từ database ("09:00:00") về "09:00" """
    return format_minutes(to_minutes(value))


def day_of_week(day: date) -> int:
    """Thứ trong tuần theo lịch barber: 0 = Chủ nhật ... 6 = Thứ bảy"""
    return (day.weekday() + 1) % 7


def combine(day: date, minutes: int) -> datetime:
    """Ghép ngày và số phút thành datetime (naive, giờ địa phương)"""
    return datetime.combine(day, time()) + timedelta(minutes=minutes)
