from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from barberbook.core.exceptions import SlotTakenError
from barberbook.dependencies.current_user import get_current_barber, get_current_user
from barberbook.dependencies.providers import get_now, get_repository
from barberbook.main import app
from barberbook.schemas.appointment_schema import Appointment, AppointmentStatus
from barberbook.schemas.barbers_schema import BarberProfile
from barberbook.schemas.schedule_schema import WorkingSchedule
from barberbook.schemas.service_schema import Service

BARBER_ID = "barber-1"
OTHER_BARBER_ID = "barber-2"
MONDAY = date(2026, 10, 19)
# Ngày hôm trước, để không slot nào của MONDAY bị coi là đã qua
BEFORE_MONDAY = datetime(2026, 10, 18, 8, 0)


class FakeRepository:
    """Repository trong bộ nhớ, cùng interface với BookingRepository.

    insert_appointment mô phỏng unique constraint
    (barber_id, appointment_date, start_time) của database, là partial
    unique index chỉ áp dụng cho lịch chưa huỷ.
    """

    def __init__(self):
        self.schedules: dict[tuple[str, int], WorkingSchedule] = {}
        self.services: dict[str, Service] = {}
        self.barbers: list[tuple[str, BarberProfile]] = []
        self.appointments: list[Appointment] = []
        self.reads = 0

    # seed helpers
    def add_schedule(self, barber_id: str = BARBER_ID, **fields) -> WorkingSchedule:
        schedule = WorkingSchedule(barber_id=barber_id, **fields)
        self.schedules[(barber_id, schedule.day_of_week)] = schedule
        return schedule

    def add_service(self, service_id: str, duration: int, barber_id: str = BARBER_ID, **fields) -> Service:
        fields.setdefault("name", f"Service {service_id}")
        fields.setdefault("price", 100.0)
        service = Service(id=service_id, barber_id=barber_id, duration_minutes=duration, **fields)
        self.services[service_id] = service
        return service

    def add_appointment(self, start: str, end: str, barber_id: str = BARBER_ID,
                        appointment_date: date = MONDAY, **fields) -> Appointment:
        appointment = Appointment(
            id=fields.pop("id", f"apt-{len(self.appointments) + 1}"),
            barber_id=barber_id,
            appointment_date=appointment_date,
            start_time=start,
            end_time=end,
            **fields,
        )
        self.appointments.append(appointment)
        return appointment

    def add_barber(self, barber_id: str, slug: str, user_id: str) -> BarberProfile:
        barber = BarberProfile(id=barber_id, full_name=f"Barber {barber_id}", slug_final=slug)
        self.barbers.append((user_id, barber))
        return barber

    # schedules
    def get_schedule(self, barber_id, day_of_week):
        schedule = self.schedules.get((barber_id, day_of_week))
        if schedule is None or not schedule.is_active:
            return None
        return schedule

    def get_schedules(self, barber_id, active_only=False):
        result = [s for (b, _), s in sorted(self.schedules.items()) if b == barber_id]
        if active_only:
            result = [s for s in result if s.is_active]
        return result

    def replace_schedules(self, barber_id, days):
        return [self.add_schedule(barber_id, **day.model_dump()) for day in days]

    # services
    def get_service(self, service_id):
        return self.services.get(service_id)

    def list_services(self, barber_id, active_only=True):
        result = [s for s in self.services.values() if s.barber_id == barber_id]
        if active_only:
            result = [s for s in result if s.is_active]
        return sorted(result, key=lambda s: s.name)

    # barbers
    def get_barber_by_slug(self, slug):
        for _, barber in self.barbers:
            if barber.slug_final == slug:
                return barber
        return None

    def get_barber_by_user(self, user_id):
        for owner, barber in self.barbers:
            if owner == user_id:
                return barber
        return None

    # appointments
    def get_appointments(self, barber_id, appointment_date, exclude_status=("cancelled",)):
        self.reads += 1
        result = [
            a for a in self.appointments
            if a.barber_id == barber_id
            and a.appointment_date == appointment_date
            and a.status.value not in exclude_status
        ]
        return sorted(result, key=lambda a: a.start_time)

    def get_appointment(self, appointment_id):
        for a in self.appointments:
            if a.id == appointment_id:
                return a
        return None

    def insert_appointment(self, payload):
        for a in self.appointments:
            if (a.barber_id == payload["barber_id"]
                    and a.appointment_date.isoformat() == payload["appointment_date"]
                    and a.start_time == payload["start_time"]
                    and a.status.value != "cancelled"):
                raise SlotTakenError(payload["barber_id"], payload["appointment_date"], payload["start_time"])

        appointment = Appointment(id=f"apt-{len(self.appointments) + 1}", **payload)
        self.appointments.append(appointment)
        return appointment

    def update_appointment_status(self, appointment_id, status, notes=None):
        for i, a in enumerate(self.appointments):
            if a.id == appointment_id:
                update = {"status": AppointmentStatus(status)}
                if notes is not None:
                    update["notes"] = notes
                self.appointments[i] = a.model_copy(update=update)
                return self.appointments[i]
        return None


@pytest.fixture
def repository() -> FakeRepository:
    repo = FakeRepository()
    # Thứ 2: 09:00 - 18:00, không nghỉ
    repo.add_schedule(day_of_week=1, start_time="09:00", end_time="18:00")
    repo.add_service("cut", 30, name="Cắt tóc")
    repo.add_service("combo", 60, name="Cắt + gội")
    repo.add_barber(BARBER_ID, "barber-one", user_id="user-1")
    repo.add_barber(OTHER_BARBER_ID, "barber-two", user_id="user-2")
    return repo


@pytest.fixture
def now() -> dict:
    # dict để test có thể đổi giờ hiện tại giữa các request
    return {"value": BEFORE_MONDAY}


@pytest.fixture
def client(repository: FakeRepository, now: dict):
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_now] = lambda: now["value"]
    app.dependency_overrides[get_current_user] = lambda: SimpleNamespace(id="user-1")
    app.dependency_overrides[get_current_barber] = lambda: repository.get_barber_by_user("user-1")
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
