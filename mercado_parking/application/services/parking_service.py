import threading
from typing import List, Optional
from mercado_parking.shared.utils import logger

from mercado_parking.application.repositories import AbstractVehicleRepository
from mercado_parking.config.settings_env import Settings, settings as default_settings
from mercado_parking.domain.common import CheckInStatus, VehicleType
from mercado_parking.domain.entities import Vehicle, TotalEarnings
from mercado_parking.domain.fees import FeeSchedule, calculate_fee
from mercado_parking.infrastructure.repositories import InMemoryVehicleRepository
from mercado_parking.schemas.parking import CheckOutResult, EarningsSummary


class ParkingService:
    """Registry of the vehicles currently parked.

    Enforces capacity and plate uniqueness on check-in, charges the fee on
    check-out and keeps the running earnings. Rejections are reported through
    return values and never leave the registry half-updated.
    """

    def __init__(
        self,
        vehicle_repo: Optional[AbstractVehicleRepository] = None,
        settings: Optional[Settings] = None
    ):
        if settings is None:
            settings = default_settings
        self.vehicle_repo = vehicle_repo if vehicle_repo is not None else InMemoryVehicleRepository()
        self.max_vehicles = settings.MAX_VEHICLES
        self.fee_schedule = FeeSchedule.from_settings(settings)
        self.total_earnings = TotalEarnings()
        self._lock = threading.Lock()

    def try_check_in(self, vehicle: Vehicle) -> CheckInStatus:
        with self._lock:
            if self.vehicle_repo.count() >= self.max_vehicles:
                logger.warning(f"Check-in rejected for {vehicle.plate}: parking is full ({self.max_vehicles} vehicles)")
                return CheckInStatus.CAPACITY_EXCEEDED

            if self.vehicle_repo.get_by_plate(vehicle.plate) is not None:
                logger.warning(f"Check-in rejected for {vehicle.plate}: vehicle is already in the parking")
                return CheckInStatus.DUPLICATE_PLATE

            self.vehicle_repo.add(vehicle)
            occupancy = self.vehicle_repo.count()

        logger.info(f"Vehicle {vehicle.plate} ({vehicle.vehicle_type.value}) checked in, {occupancy}/{self.max_vehicles} occupied")
        return CheckInStatus.ACCEPTED

    def check_in(self, vehicle: Vehicle) -> bool:
        return self.try_check_in(vehicle) is CheckInStatus.ACCEPTED

    def check_out(self, plate: str) -> CheckOutResult:
        with self._lock:
            vehicle = self.vehicle_repo.get_by_plate(plate)
            if vehicle is None:
                logger.warning(f"Check-out rejected: no vehicle with plate {plate}")
                return CheckOutResult(plate=plate, found=False)

            # Fee is computed while the vehicle is still registered
            parked_time = vehicle.parked_time
            fee = self.calculate_fee(vehicle.vehicle_type, parked_time, vehicle.has_discount_card)
            self.vehicle_repo.remove(plate)
            self.total_earnings.record(fee)

        logger.info(f"Vehicle {plate} checked out after {parked_time} minutes. Fee: ${fee}")
        return CheckOutResult(plate=plate, found=True, fee=fee)

    def calculate_fee(self, vehicle_type: VehicleType, parked_time: int, has_discount_card: bool) -> int:
        fee = calculate_fee(vehicle_type, parked_time, has_discount_card, self.fee_schedule)
        logger.debug(
            f"Fee for {VehicleType(vehicle_type).value} parked {parked_time} minutes "
            f"(discount card: {has_discount_card}): ${fee}"
        )
        return fee

    def get_vehicle(self, plate: str) -> Optional[Vehicle]:
        with self._lock:
            return self.vehicle_repo.get_by_plate(plate)

    def list_plates(self) -> List[str]:
        with self._lock:
            return self.vehicle_repo.list_plates()

    def total_earnings_summary(self) -> EarningsSummary:
        with self._lock:
            return EarningsSummary(
                vehicles_checked_out=self.total_earnings.vehicles_checked_out,
                cumulative_earnings=self.total_earnings.cumulative_earnings
            )

    @property
    def occupancy(self) -> int:
        with self._lock:
            return self.vehicle_repo.count()

    @property
    def available_spaces(self) -> int:
        return max(0, self.max_vehicles - self.occupancy)

    @property
    def is_full(self) -> bool:
        return self.occupancy >= self.max_vehicles
