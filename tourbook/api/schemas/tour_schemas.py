from typing import Optional
from pydantic import BaseModel


class TourOut(BaseModel):
    """Schema for tour responses"""
    id: str
    title: str
    description: Optional[str] = None
    price: int
    duration_days: Optional[float] = None
    available: bool

    model_config = {
        "from_attributes": True,
    }
