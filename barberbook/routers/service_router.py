from fastapi import APIRouter, Depends, Query

from barberbook.dependencies.providers import get_repository
from barberbook.services import service_service

router = APIRouter(prefix="/services", tags=["Services"])

# ==================== Read ====================
#  Route cụ thể phải đứng TRƯỚC route có path parameter

@router.get("/barber/{barber_id}")
def get_services_by_barber(
    barber_id: str,
    active_only: bool = Query(True),
    repository=Depends(get_repository),
):
    """
    Lấy danh sách dịch vụ của 1 barber
    - Không cần đăng nhập
    """
    return service_service.get_services_by_barber(repository, barber_id, active_only)


@router.get("/{service_id}")
def get_service(service_id: str, repository=Depends(get_repository)):
    """
    Lấy thông tin chi tiết 1 dịch vụ
    - Không cần đăng nhập
    """
    return service_service.get_service_by_id(repository, service_id)
