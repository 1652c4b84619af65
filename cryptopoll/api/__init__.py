"""API router."""
from fastapi import APIRouter

from cryptopoll.api import survey

api_router = APIRouter()

api_router.include_router(survey.router, tags=["Survey"])
