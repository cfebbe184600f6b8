# Vitals Feature - Schemas

from typing import List
from datetime import date, datetime
from pydantic import BaseModel, Field

from app.features.vitals.models import VitalType


class VitalCreate(BaseModel):
    """Schema for recording a vitals reading."""
    vital_type: VitalType = Field(..., alias="type", description="BP, Sugar, Weight or Heart Rate")
    value: str = Field(..., min_length=1, max_length=50, description="Reading with unit")
    entry_date: date = Field(..., alias="date")
    status: str = Field(default="Normal", max_length=30)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "type": "BP",
                "value": "120/80",
                "date": "2025-10-30",
                "status": "Normal",
            }
        }


class VitalResponse(BaseModel):
    """Schema for a vitals reading."""
    id: str
    vital_type: VitalType = Field(..., serialization_alias="type")
    value: str
    entry_date: date = Field(..., serialization_alias="date")
    status: str
    created_at: datetime


class VitalListResponse(BaseModel):
    vitals: List[VitalResponse]
    total: int
