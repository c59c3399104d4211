"""
User Use Cases
"""

from .load_profile_use_case import LoadProfileUseCase
from .dtos import ProfileResponse

__all__ = [
    "LoadProfileUseCase",
    "ProfileResponse",
]
