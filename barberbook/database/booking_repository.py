"""
Lớp truy cập dữ liệu Supabase cho lịch làm việc, dịch vụ và appointment.

Mọi lỗi mạng/backend được đổi thành PersistenceError; vi phạm unique
constraint (barber_id, appointment_date, start_time) khi insert được đổi
thành SlotTakenError.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from postgrest.exceptions import APIError

from barberbook.core.config import FREE_STATUSES
from barberbook.core.exceptions import PersistenceError, SlotTakenError
from barberbook.database.supabase_client import get_supabase
from barberbook.schemas.appointment_schema import Appointment
from barberbook.schemas.barbers_schema import BarberProfile
from barberbook.schemas.schedule_schema import WorkingSchedule, WorkingScheduleBase
from barberbook.schemas.service_schema import Service

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def _execute(query, action: str):
    try:
        return query.execute()
    except APIError as e:
        logger.error("Supabase lỗi khi %s: %s", action, e.message)
        raise PersistenceError(f"{action} thất bại: {e.message}") from e
    except Exception as e:
        logger.error("Supabase lỗi khi %s: %s", action, e)
        raise PersistenceError(f"{action} thất bại: {str(e)}") from e


class BookingRepository:
    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_supabase()
        return self._client

    # ==================== Schedules ====================

    def get_schedule(self, barber_id: str, day_of_week: int) -> Optional[WorkingSchedule]:
        """Lịch đang hoạt động của barber cho một thứ trong tuần"""
        response = _execute(
            self.client.table("barber_schedules")
                .select("*")
                .eq("barber_id", barber_id)
                .eq("day_of_week", day_of_week)
                .eq("is_active", True)
                .limit(1),
            "Lấy lịch làm việc",
        )
        if not response.data:
            return None
        return WorkingSchedule(**response.data[0])

    def get_schedules(self, barber_id: str, active_only: bool = False) -> List[WorkingSchedule]:
        query = self.client.table("barber_schedules")\
            .select("*")\
            .eq("barber_id", barber_id)

        if active_only:
            query = query.eq("is_active", True)

        response = _execute(query.order("day_of_week"), "Lấy lịch làm việc")
        return [WorkingSchedule(**row) for row in response.data]

    def replace_schedules(self, barber_id: str, days: Iterable[WorkingScheduleBase]) -> List[WorkingSchedule]:
        """Ghi đè lịch của các ngày được gửi (upsert theo barber_id, day_of_week)"""
        rows = []
        for day in days:
            rows.append({
                "barber_id": barber_id,
                "day_of_week": day.day_of_week,
                "start_time": day.start_time,
                "end_time": day.end_time,
                "is_active": day.is_active,
                "has_break": day.has_break,
                "break_start": day.break_start if day.has_break else None,
                "break_end": day.break_end if day.has_break else None,
                "break_tolerance_enabled": day.break_tolerance_enabled if day.has_break else False,
                "break_tolerance_minutes": (
                    day.break_tolerance_minutes
                    if day.has_break and day.break_tolerance_enabled else 0
                ),
            })

        # Một câu lệnh upsert: ghi lỗi thì lịch cũ vẫn còn nguyên
        response = _execute(
            self.client.table("barber_schedules").upsert(rows, on_conflict="barber_id,day_of_week"),
            "Lưu lịch làm việc",
        )
        return [WorkingSchedule(**row) for row in response.data]

    # ==================== Services ====================

    def get_service(self, service_id: str) -> Optional[Service]:
        response = _execute(
            self.client.table("services").select("*").eq("id", service_id).limit(1),
            "Lấy dịch vụ",
        )
        if not response.data:
            return None
        return Service(**response.data[0])

    def list_services(self, barber_id: str, active_only: bool = True) -> List[Service]:
        query = self.client.table("services").select("*").eq("barber_id", barber_id)
        if active_only:
            query = query.eq("is_active", True)
        response = _execute(query.order("name"), "Lấy danh sách dịch vụ")
        return [Service(**row) for row in response.data]

    # ==================== Barbers ====================

    def get_barber_by_slug(self, slug: str) -> Optional[BarberProfile]:
        response = _execute(
            self.client.table("profiles")
                .select("id, full_name, avatar_url, public_id, slug_final")
                .eq("slug_final", slug)
                .eq("role", "barber")
                .limit(1),
            "Lấy thông tin barber",
        )
        if not response.data:
            return None
        return BarberProfile(**response.data[0])

    def get_barber_by_user(self, user_id: str) -> Optional[BarberProfile]:
        response = _execute(
            self.client.table("profiles")
                .select("id, full_name, avatar_url, public_id, slug_final")
                .eq("user_id", user_id)
                .eq("role", "barber")
                .limit(1),
            "Lấy thông tin barber",
        )
        if not response.data:
            return None
        return BarberProfile(**response.data[0])

    # ==================== Appointments ====================

    def get_appointments(
        self,
        barber_id: str,
        appointment_date: date,
        exclude_status: Iterable[str] = FREE_STATUSES,
    ) -> List[Appointment]:
        """Appointment của barber trong ngày (luôn đọc mới từ database)"""
        query = self.client.table("appointments")\
            .select("*")\
            .eq("barber_id", barber_id)\
            .eq("appointment_date", appointment_date.isoformat())

        for status in exclude_status:
            query = query.neq("status", status)

        response = _execute(query.order("start_time"), "Lấy danh sách lịch hẹn")
        return [Appointment(**row) for row in response.data]

    def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        response = _execute(
            self.client.table("appointments").select("*").eq("id", appointment_id).limit(1),
            "Lấy lịch hẹn",
        )
        if not response.data:
            return None
        return Appointment(**response.data[0])

    def insert_appointment(self, payload: dict) -> Appointment:
        try:
            response = self.client.table("appointments").insert(payload).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.warning(
                    "Unique constraint chặn đặt trùng: barber=%s date=%s start=%s",
                    payload.get("barber_id"), payload.get("appointment_date"), payload.get("start_time"),
                )
                raise SlotTakenError(
                    payload.get("barber_id"), payload.get("appointment_date"), payload.get("start_time")
                ) from e
            logger.error("Supabase lỗi khi tạo lịch hẹn: %s", e.message)
            raise PersistenceError(f"Tạo lịch hẹn thất bại: {e.message}") from e
        except Exception as e:
            logger.error("Supabase lỗi khi tạo lịch hẹn: %s", e)
            raise PersistenceError(f"Tạo lịch hẹn thất bại: {str(e)}") from e

        if not response.data:
            raise PersistenceError("Tạo lịch hẹn thất bại")
        return Appointment(**response.data[0])

    def update_appointment_status(self, appointment_id: str, status: str, notes: Optional[str] = None) -> Optional[Appointment]:
        update_data = {"status": status}
        if notes is not None:
            update_data["notes"] = notes

        response = _execute(
            self.client.table("appointments").update(update_data).eq("id", appointment_id),
            "Cập nhật lịch hẹn",
        )
        if not response.data:
            return None
        return Appointment(**response.data[0])
