import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from barberbook.core.config import LOG_FORMAT, LOG_LEVEL
from barberbook.core.exceptions import NotFoundError, PersistenceError, SlotTakenError
from barberbook.routers.appointment_router import router as appointment_router
from barberbook.routers.booking_router import router as booking_router
from barberbook.routers.public_router import router as public_router
from barberbook.routers.schedule_router import router as schedule_router
from barberbook.routers.service_router import router as service_router
from barberbook.routers.time_slot_router import router as time_slot_router
from barberbook.services import notification_service

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(
    title="Barberbook API",
    description="API đặt lịch barber: lịch làm việc, khung giờ trống và đặt lịch chống trùng",
    version="1.0.0"
)

app.include_router(schedule_router)
app.include_router(service_router)
app.include_router(time_slot_router)
app.include_router(booking_router)
app.include_router(public_router)
app.include_router(appointment_router)

# ==================== Error Handlers ====================

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(SlotTakenError)
async def slot_taken_handler(request: Request, exc: SlotTakenError):
    return JSONResponse(status_code=409, content={"detail": "Khung giờ này đã có người đặt"})


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(
        status_code=502,
        content={"detail": notification_service.persistence_failed(str(exc))},
    )


@app.get("/")
async def root():
    return {
        "message": "Barberbook API is running!",
        "version": "1.0.0",
        "docs": "/docs"
    }
