# src/main.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from src.config import settings
from src.database import init_db
from src.utils.logger_config import app_logger as logger
from src.routers import (
    auth_router, team_router, player_router, player_number_router, affiliation_router,
    payment_router, admin_router, season_router, stats_router,
)

API_VERSION = "1.0.0"

app = FastAPI(title="Rugby Team API", version=API_VERSION, docs_url="/api-docs")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Toda respuesta de error sale con el mismo sobre {success, error}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": "; ".join(problems) or "Invalid request"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Error inesperado en {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error"},
    )


# Registrar rutas
for module in (
    auth_router, team_router, player_router, player_number_router, affiliation_router,
    payment_router, admin_router, season_router, stats_router,
):
    app.include_router(module.router, prefix=settings.API_PREFIX)


@app.get("/")
def home():
    return {
        "success": True,
        "message": "Rugby Team API is running",
        "version": API_VERSION,
        "documentation": "/api-docs",
    }


def main():
    logger.info("Inicializando base de datos...")
    init_db()
    logger.info("Base de datos lista.")

    logger.info(f"Levantando servidor FastAPI en http://{settings.HOST}:{settings.PORT}...")
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()
