"""
Cấu hình ứng dụng đọc từ biến môi trường (.env)
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ==================== Supabase ====================

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# ==================== Logging ====================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# ==================== Slots ====================

# Khoảng cách giữa các giờ ứng viên mặc định (phút)
SLOT_STEP_MINUTES = int(os.getenv("SLOT_STEP_MINUTES", "60"))

# Trạng thái không chiếm thời gian của barber
FREE_STATUSES = ("cancelled",)

# ==================== Default schedule ====================

# Giá trị mặc định khi barber chưa cấu hình lịch cho một ngày
DEFAULT_SCHEDULE = {
    "start_time": "09:00",
    "end_time": "18:00",
    "has_break": False,
    "break_start": "12:00",
    "break_end": "13:00",
    "break_tolerance_enabled": False,
    "break_tolerance_minutes": 15,
}

# 0 = Chủ nhật ... 6 = Thứ bảy; mặc định làm việc thứ 2 đến thứ 6
DEFAULT_ACTIVE_DAYS = (1, 2, 3, 4, 5)
