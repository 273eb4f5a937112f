"""
Create Tenant Use Case

Provisions a new organization together with its first admin.
"""

import logging
import re
import unicodedata

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Organization, User, UserRole
from .branding import DEFAULT_PRESET, PALETTE_PRESETS, branding_for
from .dtos import CreateTenantCommand, CreateTenantResponse, TenantAdminInfo, TenantInfo

logger = logging.getLogger(__name__)

PASSWORD_REGEX = re.compile(r"^(?=.*[A-Za-z])(?=.*\d)(?=.*[^A-Za-z0-9]).{8,}$")


def slugify(value: str) -> str:
    """Lower-case ASCII slug: accents stripped, runs of other characters become '-'"""
    normalized = unicodedata.normalize("NFD", value.lower())
    ascii_only = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    return re.sub(r"[^a-z0-9]+", "-", ascii_only).strip("-")


def is_strong_password(password: str) -> bool:
    return bool(PASSWORD_REGEX.match(password or ""))


class CreateTenantUseCase:
    """
    Business Rules:
    - Password policy: 8+ characters with a letter, a digit and a symbol
    - Admin email must be unused platform-wide
    - Slug derives from the name; collisions get -2, -3, ... suffixes
    - Branding preset ocean, plum or slate (unknown falls back to ocean)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _unique_slug(self, name: str) -> str:
        base = slugify(name) or "tenant"
        slug, attempt = base, 1
        while await self.uow.organizations.get_by_slug(slug) is not None:
            attempt += 1
            slug = f"{base}-{attempt}"
        return slug

    async def execute(self, command: CreateTenantCommand) -> Result[CreateTenantResponse]:
        name = command.name.strip()
        if not name:
            return Return.err(Error("MISSING_FIELDS", "Nombre, email y contraseña son requeridos"))
        if not is_strong_password(command.password):
            return Return.err(
                Error(
                    "WEAK_PASSWORD",
                    "La contraseña debe tener 8+ caracteres, letras, números y símbolo",
                )
            )

        email = command.email.strip().lower()
        preset = command.palette if command.palette in PALETTE_PRESETS else DEFAULT_PRESET

        async with self.uow:
            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "El correo ya está en uso"))

            organization = await self.uow.organizations.create(
                Organization(
                    name=name,
                    slug=await self._unique_slug(name),
                    logo_url=command.logo_url,
                    is_active=True,
                    org_metadata={"branding": branding_for(preset, command.logo_url)},
                )
            )
            password_hash = bcrypt.hashpw(command.password.encode(), bcrypt.gensalt(12))
            admin = await self.uow.users.create(
                User(
                    organization_id=organization.id,
                    email=email,
                    name=(command.admin_name or name).strip(),
                    role=UserRole.admin,
                    password_hash=password_hash.decode(),
                )
            )
            await self.uow.commit()

        logger.info(f"Tenant {organization.slug} created with admin {admin.id}")
        return Return.ok(
            CreateTenantResponse(
                organization=TenantInfo.from_entity(organization, user_count=1),
                admin=TenantAdminInfo(id=str(admin.id), email=admin.email, role=admin.role.value),
                preset=preset,
            )
        )
