import pytest
from datetime import datetime, timezone

from mercado_parking.application.services.parking_service import ParkingService
from mercado_parking.config.settings_env import Settings
from mercado_parking.domain.common import VehicleType
from mercado_parking.domain.entities import Vehicle
from mercado_parking.infrastructure.repositories import InMemoryVehicleRepository


@pytest.fixture
def test_settings():
    """Provide test settings."""
    return Settings(
        DEV_MODE=True,
        MAX_VEHICLES=20,
        INITIAL_PERIOD_MINUTES=120,
        ADDITIONAL_BLOCK_MINUTES=15,
        ADDITIONAL_BLOCK_FEE=5,
        DISCOUNT_PERCENTAGE=15
    )


@pytest.fixture
def vehicle_repo():
    return InMemoryVehicleRepository()


@pytest.fixture
def parking_service(vehicle_repo, test_settings):
    """Create a ParkingService instance with an empty in-memory repository."""
    return ParkingService(vehicle_repo=vehicle_repo, settings=test_settings)


@pytest.fixture
def small_parking_service(test_settings):
    """A parking with room for three vehicles."""
    return ParkingService(settings=test_settings.model_copy(update={"MAX_VEHICLES": 3}))


@pytest.fixture
def make_vehicle():
    """Build vehicles checked in at a fixed instant unless told otherwise."""
    def _make_vehicle(plate="AA111AA", vehicle_type=VehicleType.CAR, check_in_time=None, discount_card=None):
        if check_in_time is None:
            check_in_time = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        return Vehicle(
            plate=plate,
            vehicle_type=vehicle_type,
            check_in_time=check_in_time,
            discount_card=discount_card
        )
    return _make_vehicle


@pytest.fixture
def full_parking(parking_service, make_vehicle):
    """A parking holding as many vehicles as it allows."""
    for i in range(parking_service.max_vehicles):
        assert parking_service.check_in(make_vehicle(plate=f"FULL{i:03d}"))
    return parking_service
