from .in_memory_repositories import InMemoryVehicleRepository

__all__ = [
    "InMemoryVehicleRepository",
]
