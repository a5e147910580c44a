from typing import List

from barberbook.core.exceptions import NotFoundError
from barberbook.schemas.service_schema import Service

# ==================== Get Services ====================

def get_service_by_id(repository, service_id: str) -> Service:
    """Lấy thông tin dịch vụ theo ID"""
    service = repository.get_service(service_id)
    if service is None:
        raise NotFoundError("Không tìm thấy dịch vụ")
    return service


def get_services_by_barber(repository, barber_id: str, active_only: bool = True) -> List[Service]:
    """Lấy danh sách dịch vụ của 1 barber, sắp xếp theo tên"""
    return repository.list_services(barber_id, active_only=active_only)
