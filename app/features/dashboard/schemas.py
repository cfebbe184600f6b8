# Dashboard Feature - Schemas

from typing import List
from pydantic import BaseModel

from app.features.vitals.schemas import VitalResponse


class DashboardStatsResponse(BaseModel):
    """Response schema for dashboard statistics."""
    reports_count: int
    vitals_count: int
    reviewed_reports: int
    pending_reports: int
    uploaded_reports: int
    latest_vitals: List[VitalResponse]

    class Config:
        json_schema_extra = {
            "example": {
                "reports_count": 4,
                "vitals_count": 4,
                "reviewed_reports": 2,
                "pending_reports": 1,
                "uploaded_reports": 1,
                "latest_vitals": [
                    {
                        "id": "6710f0c2a1b2c3d4e5f60718",
                        "type": "BP",
                        "value": "120/80",
                        "date": "2025-10-30",
                        "status": "Normal",
                        "created_at": "2025-10-30T08:00:00Z",
                    }
                ],
            }
        }
