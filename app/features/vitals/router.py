# Vitals Feature - Router

from fastapi import APIRouter, Depends, status
from app.features.auth.models import User
from app.features.auth.dependencies import get_current_user
from app.features.vitals.schemas import VitalCreate, VitalResponse, VitalListResponse
from app.features.vitals.service import VitalService


router = APIRouter(prefix="/vitals", tags=["Vitals"])


@router.post("", response_model=VitalResponse, status_code=status.HTTP_201_CREATED)
async def create_vital(
    vital_data: VitalCreate,
    current_user: User = Depends(get_current_user)
):
    """
    Record a vitals reading.

    - **type**: BP, Sugar, Weight or Heart Rate
    - **value**: Reading with unit, e.g. "120/80" or "95 mg/dL"
    - **date**: Date of the reading
    - **status**: Optional label such as Normal or Stable
    """
    return await VitalService.create_vital(str(current_user.id), vital_data)


@router.get("", response_model=VitalListResponse)
async def list_vitals(current_user: User = Depends(get_current_user)):
    """Get all vitals readings for the current user."""
    vitals = await VitalService.list_vitals(str(current_user.id))
    return VitalListResponse(vitals=vitals, total=len(vitals))


@router.delete("/{vital_id}")
async def delete_vital(
    vital_id: str,
    current_user: User = Depends(get_current_user)
):
    """Delete a vitals reading."""
    await VitalService.delete_vital(str(current_user.id), vital_id)
    return {"message": "Vitals entry deleted successfully"}
