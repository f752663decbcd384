"""FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from todo_api.config import settings
from todo_api.database import Base, engine
from todo_api.errors import register_exception_handlers
from todo_api.logging_setup import configure_logging

# Import routers
from todo_api.routers import auth, users, tasks

# Import all models so Base.metadata knows about them
from todo_api.models.user import User  # noqa: F401
from todo_api.models.task import Task  # noqa: F401

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Todo API",
    description="Token-authenticated to-do list API — each user owns an ordered task list",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(tasks.router, prefix="/api/users", tags=["Tasks"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
