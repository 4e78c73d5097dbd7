"""
Read-only admin dashboard endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cringeshield.config import get_db
from cringeshield.models.models import User
from cringeshield.schemas.admin_schemas import AdminUserDetails, AdminUserListItem, GlobalStatsResponse
from cringeshield.services.admin_service import AdminService
from cringeshield.utils.auth import require_admin

admin_routes = APIRouter()


@admin_routes.get("/admin/stats", response_model=GlobalStatsResponse)
async def get_global_stats(
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
) -> GlobalStatsResponse:
    return AdminService(db).global_stats()


@admin_routes.get("/admin/users", response_model=list[AdminUserListItem])
async def list_users(
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
) -> list[AdminUserListItem]:
    return AdminService(db).list_users()


@admin_routes.get("/admin/users/{user_id}", response_model=AdminUserDetails)
async def get_user_details(
    user_id: int,
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
) -> AdminUserDetails:
    return AdminService(db).user_details(user_id)
