from typing import Dict, List, Optional

from mercado_parking.application.repositories import AbstractVehicleRepository
from mercado_parking.domain.entities import Vehicle, plate_key


class InMemoryVehicleRepository(AbstractVehicleRepository):
    def __init__(self):
        self._vehicles: Dict[str, Vehicle] = {}

    def get_by_plate(self, plate: str) -> Optional[Vehicle]:
        return self._vehicles.get(plate)

    def add(self, vehicle: Vehicle) -> Vehicle:
        key = plate_key(vehicle)
        if key in self._vehicles:
            raise ValueError(f"Vehicle {key} is already stored")
        self._vehicles[key] = vehicle
        return vehicle

    def remove(self, plate: str) -> Optional[Vehicle]:
        return self._vehicles.pop(plate, None)

    def count(self) -> int:
        return len(self._vehicles)

    def list_plates(self) -> List[str]:
        return list(self._vehicles)

    def get_all(self) -> List[Vehicle]:
        return list(self._vehicles.values())
