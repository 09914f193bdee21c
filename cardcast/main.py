import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardcast.api import decks_router, health_router
from cardcast.config import settings

logging.getLogger("cardcast").setLevel(settings.log_level.upper())

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardcast"),
    debug=settings.debug,
)

app.include_router(decks_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
