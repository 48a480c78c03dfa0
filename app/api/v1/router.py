"""API v1 router configuration."""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, comments, health, reviews

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["Reviews"])
api_router.include_router(comments.router, prefix="/comments", tags=["Comments"])
