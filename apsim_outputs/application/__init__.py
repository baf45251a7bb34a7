"""Application layer for APSIM output loading.

This layer contains use cases and application-level orchestration logic.
It defines ports (interfaces) for external dependencies.
"""

from .models import FileLoadResult, LoadOutputsRequest, LoadOutputsResponse

# Import LoadOutputsUseCase directly when needed:
#   from apsim_outputs.application.load_outputs_use_case import LoadOutputsUseCase

__all__ = [
    "FileLoadResult",
    "LoadOutputsRequest",
    "LoadOutputsResponse",
]
