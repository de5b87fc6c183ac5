from src.services import (
    chore_library_service,
    frequency_service,
    scheduling_service,
)


__all__ = [
    "chore_library_service",
    "frequency_service",
    "scheduling_service",
]
