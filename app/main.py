# app/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from app import models  # noqa: F401  registra las tablas en Base.metadata
from app.core.config import get_settings
from app.core.errors import register_error_handlers
from app.db import Base, engine
from app.routers import customers, employees, projects, roles, system, technologies

logger = logging.getLogger("app")

tags_metadata = [
    {"name": "System", "description": "Salud del servicio y metadatos."},
    {"name": "Roles", "description": "Roles y salario mínimo."},
    {"name": "Employees", "description": "Empleados, filtros por apellido/fecha y tecnologías."},
    {"name": "Projects", "description": "Proyectos y asignación de empleados."},
    {"name": "Technologies", "description": "Catálogo de tecnologías."},
    {"name": "Customers", "description": "Clientes y su empleado de referencia."},
]

@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    if settings.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    yield

def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    register_error_handlers(app)

    # Redirige "/" -> "/docs"
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")
    app.include_router(system.router, prefix=settings.API_PREFIX)
    app.include_router(roles.router, prefix=settings.API_PREFIX)
    app.include_router(employees.router, prefix=settings.API_PREFIX)
    app.include_router(projects.router, prefix=settings.API_PREFIX)
    app.include_router(technologies.router, prefix=settings.API_PREFIX)
    app.include_router(customers.router, prefix=settings.API_PREFIX)
    for r in app.routes:
        path = getattr(r, "path", None)
        if path is None:
            continue
        logger.debug("route %s %s", path, sorted(getattr(r, "methods", None) or []))
    return app

app = create_app()
