import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import analyze, countries, health

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

app = FastAPI(title="Relocation Engine", version="0.1.0")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(analyze.router)


@app.get("/")
async def root():
    return {
        "name": "Relocation Engine API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/analyze"],
    }


@app.on_event("startup")
async def startup():
    logger.info("Relocation Engine API is running")


@app.on_event("shutdown")
async def shutdown():
    from utils.http_client import close_client
    await close_client()
