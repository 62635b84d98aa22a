from abc import ABC, abstractmethod
from typing import List, Optional

from mercado_parking.domain.entities import Vehicle


class AbstractVehicleRepository(ABC):
    @abstractmethod
    def get_by_plate(self, plate: str) -> Optional[Vehicle]:
        pass

    @abstractmethod
    def add(self, vehicle: Vehicle) -> Vehicle:
        pass

    @abstractmethod
    def remove(self, plate: str) -> Optional[Vehicle]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def list_plates(self) -> List[str]:
        pass

    @abstractmethod
    def get_all(self) -> List[Vehicle]:
        pass
