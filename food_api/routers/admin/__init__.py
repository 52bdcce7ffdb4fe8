# food_api/routers/admin/__init__.py

from fastapi import APIRouter, Depends
from food_api.dependencies import get_admin_user

from . import coupons, menu, settings

# Зависимость get_admin_user применяется ко ВСЕМ эндпоинтам админского раздела.
router = APIRouter(
    tags=["Admin"],
    dependencies=[Depends(get_admin_user)]
)

# /admin/coupons, /admin/coupons/{id}
router.include_router(coupons.router, prefix="/coupons")

# /admin/menu, /admin/menu/{id}
router.include_router(menu.router, prefix="/menu")

# /admin/settings
router.include_router(settings.router, prefix="/settings")
