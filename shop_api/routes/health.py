from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/")
def root(request: Request):
    return {"ok": True, "service": request.app.state.settings.SERVICE_NAME}

@router.get("/health")
def health(request: Request):
    """Health check endpoint for Docker health checks"""
    try:
        request.app.state.database.ping()
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        return {"status": "unhealthy", "database": "disconnected", "error": str(e)}
