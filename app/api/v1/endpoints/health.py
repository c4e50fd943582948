from fastapi import APIRouter, Depends
from app.api.deps import get_store
from app.core.config import settings
from app.services.student.store import StudentStore

router = APIRouter()


@router.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "message": "Welcome to Student Management API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


@router.get("/health")
def health(store: StudentStore = Depends(get_store)):
    """
    Kiểm tra kết nối database
    """
    return {
        "status": "ok",
        "database": store.is_available()
    }
