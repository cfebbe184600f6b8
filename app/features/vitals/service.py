# Vitals Feature - Service

from typing import List
from bson import ObjectId

from app.features.vitals.models import VitalEntry
from app.features.vitals.schemas import VitalCreate, VitalResponse
from app.core.logging import logger
from app.shared.exceptions import NotFoundException


class VitalService:
    """Service class for vitals operations."""

    @staticmethod
    def _entry_to_response(entry: VitalEntry) -> VitalResponse:
        return VitalResponse(
            id=str(entry.id),
            vital_type=entry.vital_type,
            value=entry.value,
            entry_date=entry.entry_date,
            status=entry.status,
            created_at=entry.created_at,
        )

    @staticmethod
    async def create_vital(user_id: str, vital_data: VitalCreate) -> VitalResponse:
        entry = VitalEntry(
            user_id=user_id,
            vital_type=vital_data.vital_type.value,
            value=vital_data.value,
            entry_date=vital_data.entry_date.isoformat(),
            status=vital_data.status,
        )
        await entry.insert()

        logger.info(f"Recorded {entry.vital_type} reading for user {user_id}")

        return VitalService._entry_to_response(entry)

    @staticmethod
    async def list_vitals(user_id: str) -> List[VitalResponse]:
        """Get all vitals readings for a user, most recent date first."""
        entries = await VitalEntry.find(
            VitalEntry.user_id == user_id
        ).sort([("entry_date", -1), ("created_at", -1)]).to_list()

        return [VitalService._entry_to_response(e) for e in entries]

    @staticmethod
    async def delete_vital(user_id: str, vital_id: str) -> None:
        if not ObjectId.is_valid(vital_id):
            raise NotFoundException("Vitals entry not found")

        entry = await VitalEntry.get(ObjectId(vital_id))
        if not entry or entry.user_id != user_id:
            raise NotFoundException("Vitals entry not found")

        await entry.delete()
