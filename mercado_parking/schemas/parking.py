from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from mercado_parking.domain.common import VehicleType
from mercado_parking.domain.entities import Vehicle


class VehicleCheckIn(BaseModel):
    plate: str = Field(..., min_length=1, max_length=20)
    vehicle_type: VehicleType
    check_in_time: Optional[datetime] = None
    discount_card: Optional[str] = None

    @field_validator('plate')
    @classmethod
    def validate_plate(cls, v):
        # Plates are case-sensitive, only surrounding whitespace is dropped
        v = v.strip()
        if not v:
            raise ValueError("plate must not be blank")
        return v

    def to_entity(self) -> Vehicle:
        return Vehicle(
            plate=self.plate,
            vehicle_type=self.vehicle_type,
            check_in_time=self.check_in_time,
            discount_card=self.discount_card
        )


class CheckOutResult(BaseModel):
    plate: str
    found: bool
    fee: int = Field(default=0, ge=0)


class EarningsSummary(BaseModel):
    vehicles_checked_out: int = Field(default=0, ge=0)
    cumulative_earnings: int = Field(default=0, ge=0)

    @property
    def message(self) -> str:
        return (
            f"{self.vehicles_checked_out} vehicles have checked out "
            f"and have earnings of ${self.cumulative_earnings}"
        )
