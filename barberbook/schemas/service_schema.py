from pydantic import BaseModel, Field
from typing import Optional

# Response service
class Service(BaseModel):
    id: str
    barber_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    duration_minutes: int = Field(..., gt=0)
    price: float
    is_active: Optional[bool] = True
    image_url: Optional[str] = None

    class Config:
        from_attributes = True
