import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

# Importar la función de configuración de logging
from app.core.logging_config import setup_logging

# Llamar a la configuración de logging ANTES de importar/crear otros elementos
setup_logging()

from app.api.v1.api import api_router
from app.core.auth import Auth0
from app.core.config import get_settings
from app.core.exceptions import NotFoundError
from app.db.session import Database
from app.middleware.timing import TimingMiddleware

logger = logging.getLogger(__name__)

# Obtener la instancia de configuración al inicio del módulo
settings_instance = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan: Startup iniciado...")

    # El cliente del almacén se construye una vez y vive en app.state
    database = Database.from_settings(settings_instance)
    if settings_instance.CREATE_TABLES_ON_STARTUP:
        await database.create_all()
    app.state.database = database
    app.state.auth = Auth0.from_settings(settings_instance)
    logger.info("Lifespan: Database y verificador de autenticación inicializados.")

    yield  # Aplicación en ejecución

    logger.info("Lifespan: Shutdown iniciado...")
    await database.dispose()


app = FastAPI(
    title=settings_instance.PROJECT_NAME,
    description=settings_instance.PROJECT_DESCRIPTION,
    version=settings_instance.VERSION,
    openapi_url=f"{settings_instance.API_V1_STR}/openapi.json",
    docs_url=f"{settings_instance.API_V1_STR}/docs",
    redoc_url=f"{settings_instance.API_V1_STR}/redoc",
    lifespan=lifespan,
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


def _masked_headers(request: Request) -> dict:
    headers_dict = dict(request.headers)
    auth_header = headers_dict.get("authorization")
    if auth_header:
        if auth_header.startswith("Bearer "):
            token = auth_header[7:]
            headers_dict["authorization"] = f"Bearer ****{token[-6:]}" if len(token) > 6 else "Bearer ****"
        else:
            headers_dict["authorization"] = "***masked***"
    if "cookie" in headers_dict:
        headers_dict["cookie"] = "***masked***"
    return headers_dict


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Middleware: Recibida petición: {request.method} {request.url}")
    if settings_instance.DEBUG_MODE:
        logger.debug(f"Middleware: Headers: {_masked_headers(request)}")

    response = await call_next(request)

    logger.info(f"Middleware: Enviando respuesta: {response.status_code}")
    return response


# Añadir middleware para medir el tiempo de respuesta
app.add_middleware(TimingMiddleware)

# Lista de orígenes permitidos para CORS
origins = [str(origin).rstrip("/") for origin in settings_instance.BACKEND_CORS_ORIGINS]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=86400,  # 24 horas en segundos
)

# Incluir routers
app.include_router(api_router, prefix=settings_instance.API_V1_STR)


# Ruta raíz
@app.get("/")
def root():
    return {
        "message": f"Bienvenido a {settings_instance.PROJECT_NAME}",
        "docs": f"{settings_instance.API_V1_STR}/docs",
    }


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings_instance.DEBUG_MODE)
