"""Parking fee computation.

The base fee of a vehicle type covers an initial period. Every started
block after it adds a flat amount, and a discount card takes a percentage
off the total. The discount amount is truncated to a whole unit.
"""
from dataclasses import dataclass

from mercado_parking.config.settings_env import Settings
from mercado_parking.domain.common import VehicleType


@dataclass(frozen=True)
class FeeSchedule:
    initial_period_minutes: int = 120
    additional_block_minutes: int = 15
    additional_block_fee: int = 5
    discount_percentage: int = 15

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeeSchedule":
        return cls(
            initial_period_minutes=settings.INITIAL_PERIOD_MINUTES,
            additional_block_minutes=settings.ADDITIONAL_BLOCK_MINUTES,
            additional_block_fee=settings.ADDITIONAL_BLOCK_FEE,
            discount_percentage=settings.DISCOUNT_PERCENTAGE,
        )

    def additional_blocks(self, parked_time: int) -> int:
        remaining = parked_time - self.initial_period_minutes
        if remaining <= 0:
            return 0
        # Ceiling division: a started block is a full block
        return -(-remaining // self.additional_block_minutes)

    def discount(self, fee: int) -> int:
        return fee * self.discount_percentage // 100


DEFAULT_SCHEDULE = FeeSchedule()


def calculate_fee(
    vehicle_type: VehicleType,
    parked_time: int,
    has_discount_card: bool,
    schedule: FeeSchedule = DEFAULT_SCHEDULE,
) -> int:
    parked_time = max(0, parked_time)
    fee = VehicleType(vehicle_type).base_fee
    fee += schedule.additional_blocks(parked_time) * schedule.additional_block_fee
    if has_discount_card:
        fee -= schedule.discount(fee)
    return fee
