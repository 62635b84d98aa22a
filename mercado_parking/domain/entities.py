from datetime import datetime, timezone
from typing import Optional

from mercado_parking.domain.common import VehicleType


def plate_key(vehicle: "Vehicle") -> str:
    """Key used to store and compare vehicles."""
    return vehicle.plate


class Vehicle:
    """A vehicle identified by its plate.

    Equality and hashing only look at the plate, so two records with the
    same plate are the same vehicle regardless of type or check-in time.
    """

    def __init__(
        self,
        plate: str,
        vehicle_type: VehicleType,
        check_in_time: Optional[datetime] = None,
        discount_card: Optional[str] = None,
    ):
        if not plate:
            raise ValueError("Vehicle plate must not be empty")
        self._plate = plate
        self._vehicle_type = VehicleType(vehicle_type)
        if check_in_time is None:
            check_in_time = datetime.now(timezone.utc)
        elif check_in_time.tzinfo is None:
            check_in_time = check_in_time.replace(tzinfo=timezone.utc)
        self._check_in_time = check_in_time
        self._discount_card = discount_card

    @property
    def plate(self) -> str:
        return self._plate

    @property
    def vehicle_type(self) -> VehicleType:
        return self._vehicle_type

    @property
    def check_in_time(self) -> datetime:
        return self._check_in_time

    @property
    def discount_card(self) -> Optional[str]:
        return self._discount_card

    @property
    def has_discount_card(self) -> bool:
        return self._discount_card is not None

    @property
    def parked_time(self) -> int:
        """Whole minutes since check-in, never negative."""
        elapsed = datetime.now(timezone.utc) - self._check_in_time
        return max(0, int(elapsed.total_seconds() // 60))

    def __eq__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return plate_key(self) == plate_key(other)

    def __hash__(self):
        return hash(plate_key(self))

    def __repr__(self):
        return f"Vehicle(plate={self._plate!r}, vehicle_type={self._vehicle_type.value!r})"


class TotalEarnings:
    def __init__(self, vehicles_checked_out: int = 0, cumulative_earnings: int = 0):
        self.vehicles_checked_out = vehicles_checked_out
        self.cumulative_earnings = cumulative_earnings

    def record(self, fee: int) -> None:
        self.vehicles_checked_out += 1
        self.cumulative_earnings += fee
