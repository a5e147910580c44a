import logging
from datetime import date

logger = logging.getLogger(__name__)


def booking_confirmed(service_name: str, appointment_date: date, start_time: str) -> str:
    """Thông báo đặt lịch thành công: tên dịch vụ, ngày, giờ"""
    message = f"Đặt lịch thành công: {service_name} ngày {appointment_date.strftime('%d/%m')} lúc {start_time}"
    logger.info(message)
    return message


def slot_taken(appointment_date: date, start_time: str) -> str:
    logger.info("Slot %s %s vừa bị đặt, yêu cầu chọn lại", appointment_date.isoformat(), start_time)
    return "Khung giờ này vừa có người đặt. Vui lòng chọn giờ khác."


def persistence_failed(detail: str) -> str:
    logger.error("Lỗi lưu trữ: %s", detail)
    return f"Đặt lịch thất bại: {detail}"
