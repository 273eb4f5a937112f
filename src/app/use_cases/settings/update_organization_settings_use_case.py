"""
Update Organization Settings Use Case

Admins rename their organization, change its public slug, support contact,
logo and palette preset.
"""

from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.superadmin.branding import PALETTE_PRESETS, branding_for
from src.app.use_cases.superadmin.create_tenant_use_case import slugify
from .dtos import OrganizationSettingsResponse

UPDATABLE_FIELDS = ("name", "slug", "support_email", "logo_url", "preset")

# Slugs that would shadow a route of the portal
RESERVED_SLUGS = {"login", "admin", "client", "api", "superadmin", "auth"}


class UpdateOrganizationSettingsUseCase:
    """
    Business Rules:
    - Admin only (Role Gate at the route)
    - Only whitelisted fields are applied; an update with none of them is rejected
    - The slug is normalized like tenant slugs; reserved or empty slugs are
      rejected (INVALID_SLUG) and one used by another organization conflicts (409)
    - logo_url is mirrored into the stored branding
    - preset swaps both palettes for one of the tenant presets
    - Logs branding_updated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, changes: Dict[str, Any]
    ) -> Result[OrganizationSettingsResponse]:
        updates = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        if not updates:
            return Return.err(Error("NO_FIELDS", "No hay campos válidos para actualizar"))

        if "name" in updates:
            updates["name"] = (updates["name"] or "").strip()
            if not updates["name"]:
                return Return.err(Error("INVALID_NAME", "El nombre es obligatorio"))
        if "slug" in updates:
            updates["slug"] = slugify(updates["slug"] or "")
            if not updates["slug"] or updates["slug"] in RESERVED_SLUGS:
                return Return.err(Error("INVALID_SLUG", "Ese identificador no está disponible"))
        if "preset" in updates and updates["preset"] not in PALETTE_PRESETS:
            return Return.err(
                Error("INVALID_PRESET", f"Paleta desconocida: {updates['preset']}")
            )

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(principal.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organización no encontrada"))

            if "slug" in updates and updates["slug"] != organization.slug:
                taken = await self.uow.organizations.get_by_slug(updates["slug"])
                if taken is not None and taken.id != organization.id:
                    return Return.err(
                        Error("SLUG_ALREADY_EXISTS", "Ese identificador ya está en uso")
                    )

            for key in ("name", "slug", "support_email", "logo_url"):
                if key in updates:
                    setattr(organization, key, updates[key])

            # JSON columns only persist reassignment, not in-place mutation
            metadata = dict(organization.org_metadata or {})
            branding = dict(metadata.get("branding") or {})
            if "preset" in updates:
                branding.update(branding_for(updates["preset"], branding.get("logo_url")))
            if "logo_url" in updates:
                branding["logo_url"] = updates["logo_url"]
            metadata["branding"] = branding
            organization.org_metadata = metadata

            await self.uow.organizations.update(organization)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "branding_updated",
                "Actualizó la configuración de la organización",
                metadata={"fields": sorted(updates.keys())},
            )
            await self.uow.commit()

        return Return.ok(OrganizationSettingsResponse.from_entity(organization))
