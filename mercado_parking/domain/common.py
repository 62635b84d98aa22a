from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    MINI_BUS = "mini_bus"
    BUS = "bus"

    @property
    def base_fee(self) -> int:
        """Fee for the initial period."""
        return BASE_FEES[self]


BASE_FEES = {
    VehicleType.CAR: 20,
    VehicleType.MOTORCYCLE: 15,
    VehicleType.MINI_BUS: 25,
    VehicleType.BUS: 30,
}


class CheckInStatus(str, Enum):
    ACCEPTED = "accepted"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    DUPLICATE_PLATE = "duplicate_plate"
