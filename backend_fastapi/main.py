import logging
import os
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.error_handlers import register_error_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "info").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def _env_list(name: str, default: str = "*") -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


app = FastAPI(title="Tasks API")

# Los errores se renderizan dentro de CORS para que lleven sus cabeceras.
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_env_list("CORS_ORIGINS"),
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=_env_list("CORS_ALLOW_METHODS"),
    allow_headers=_env_list("CORS_ALLOW_HEADERS"),
)

app.include_router(tasks_router)
