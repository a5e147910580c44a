from fastapi import Depends, HTTPException, Header

from barberbook.database.supabase_client import get_supabase
from barberbook.dependencies.providers import get_repository

def get_current_user(authorization: str = Header(...)):
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid token")
    token = authorization.split(" ")[1]
    user = get_supabase().auth.get_user(token).user
    if not user:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user


def get_current_barber(current_user=Depends(get_current_user), repository=Depends(get_repository)):
    """Hồ sơ barber của user đang đăng nhập"""
    barber = repository.get_barber_by_user(str(current_user.id))
    if barber is None:
        raise HTTPException(status_code=403, detail="Chỉ barber mới được thực hiện thao tác này")
    return barber


def require_owner(barber_id: str, barber) -> None:
    """Barber chỉ được sửa dữ liệu của chính mình"""
    if barber.id != barber_id:
        raise HTTPException(status_code=403, detail="Không có quyền với barber này")
