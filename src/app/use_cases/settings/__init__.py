"""
Organization Settings Use Cases
"""

from .dtos import OrganizationSettingsResponse
from .get_organization_settings_use_case import GetOrganizationSettingsUseCase
from .update_organization_settings_use_case import (
    RESERVED_SLUGS,
    UpdateOrganizationSettingsUseCase,
)

__all__ = [
    "GetOrganizationSettingsUseCase",
    "UpdateOrganizationSettingsUseCase",
    "OrganizationSettingsResponse",
    "RESERVED_SLUGS",
]
