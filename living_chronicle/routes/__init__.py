"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, engine config), civilizations (metadata and
event logs), chronicles (compile one, compile a batch, preview an ad hoc event
snapshot). The service is created by create_app() and kept on app.state.
"""

from fastapi import APIRouter

from .chronicles import router as chronicles_router
from .civilizations import router as civilizations_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(civilizations_router)
router.include_router(chronicles_router)
