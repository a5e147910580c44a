class BookingError(Exception):
    """Lỗi nghiệp vụ khi đặt lịch"""


class SlotTakenError(BookingError):
    """Khung giờ vừa bị người khác đặt trước khi xác nhận.

    Caller phải tạo lại danh sách slot và yêu cầu người dùng chọn lại,
    không được gửi lại giờ cũ.
    """

    def __init__(self, barber_id: str, appointment_date: str, start_time: str):
        self.barber_id = barber_id
        self.appointment_date = appointment_date
        self.start_time = start_time
        super().__init__(
            f"Slot {appointment_date} {start_time} của barber {barber_id} đã được đặt"
        )


class PersistenceError(BookingError):
    """Lỗi khi đọc/ghi Supabase (mạng hoặc backend)"""


class NotFoundError(BookingError):
    """Không tìm thấy bản ghi"""
