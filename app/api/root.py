from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Gourmetto RH",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
