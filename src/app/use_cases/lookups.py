"""Lookups shared by use cases"""

from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import UUID

from src.app.services.authorization import STAFF_ROLES
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User


def parse_uuid(value) -> Optional[UUID]:
    if value is None or isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


async def people_by_id(uow: UnitOfWork, scope: TenantScope) -> Dict[UUID, User]:
    """Users of the organization keyed by id, for display names"""
    users = await uow.users.list_in_scope(scope)
    return {user.id: user for user in users}


async def find_staff_member(uow: UnitOfWork, scope: TenantScope, user_id) -> Optional[User]:
    """Admin or staff user of the scope's organization"""
    parsed = parse_uuid(user_id)
    if parsed is None:
        return None
    user = await uow.users.get_in_scope(scope, parsed)
    if user is None or user.role not in STAFF_ROLES:
        return None
    return user


def naive_utc(value):
    """Drop tzinfo after converting to UTC; columns store naive UTC"""
    if not isinstance(value, datetime) or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
