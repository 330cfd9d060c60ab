"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health check endpoint for monitoring.")
def health_check():
    return {"message": "Server is running"}
