"""Router de eventos: agrega os endpoints do relay Notion."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.events.relay import router as relay_router

router = APIRouter()

router.include_router(relay_router)
