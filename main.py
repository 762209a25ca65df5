from typing import Optional
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import Database, get_db
from app.core.config import settings
from app.core.error_handlers import register_error_handlers
from app.core.logging_config import logger
from app.routers import auth, contacts, firms, property, users

# Schema changes go through Alembic; Database.create_all is for tests and scripts


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the API application around an explicit store handle.

    Args:
        database: Store to serve from. Defaults to one built from
            settings.DATABASE_URL.
    """
    app = FastAPI(
        title="REMS Property Management API",
        version="1.0.0",
        redirect_slashes=False  # Disable automatic redirects to prevent POST data loss
    )
    app.state.database = database or Database(settings.DATABASE_URL)

    # Configure CORS for the role portals
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(firms.router, prefix="/api/firms", tags=["Firms"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(property.router, prefix="/api/properties", tags=["Properties"])
    app.include_router(contacts.owners_router, prefix="/api/owners", tags=["Owners"])
    app.include_router(contacts.tenants_router, prefix="/api/tenants", tags=["Tenants"])

    @app.get("/health")
    async def health_check(db: Session = Depends(get_db)):
        try:
            db.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "database": "connected"
            }
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Service unhealthy"
            )

    return app


app = create_app()
