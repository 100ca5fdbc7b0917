"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from piecetrack.presentation.api.v1.endpoints.health import router as health_router
from piecetrack.presentation.api.v1.endpoints.users import router as users_router
from piecetrack.presentation.api.v1.endpoints.statuses import router as statuses_router
from piecetrack.presentation.api.v1.endpoints.pieces import preview_router, router as pieces_router
from piecetrack.presentation.api.v1.endpoints.reports import router as reports_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(users_router)
router.include_router(statuses_router)
router.include_router(pieces_router)
router.include_router(preview_router)
router.include_router(reports_router)
