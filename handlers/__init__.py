from .common import router as common_router
from .admin import router as admin_router
from .survey import router as survey_router

__all__ = ["common_router", "admin_router", "survey_router"]
