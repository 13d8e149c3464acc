import logging, re, time
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from pvtracker import models  # noqa: F401
from pvtracker.config import APP_NAME, APP_VERSION, CORS_ORIGINS, LOG_LEVEL
from pvtracker.database import Base, SessionLocal, engine
from pvtracker.routes import installations
from pvtracker.services import cache

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)


SECURE_HEADERS = {
    'X-Frame-Options': 'DENY',
    'X-Content-Type-Options': 'nosniff',
    'Referrer-Policy': 'no-referrer',
    'Strict-Transport-Security': 'max-age=63072000; includeSubDomains; preload',
}


class SecureHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.update(SECURE_HEADERS)
        return response


INSTALLATION_PATH = re.compile(r"^/installations/(\d+)(?:/|$)")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request, tagged with the installation it touches."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        match = INSTALLATION_PATH.match(request.url.path)
        installation = match.group(1) if match else "-"
        logger.info(
            "%s %s installation=%s status=%s %.2fms",
            request.method, request.url.path, installation, response.status_code, elapsed_ms,
        )
        return response


Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=APP_NAME,
    description="API for registering PV installations and tracking their production reports",
    version=APP_VERSION
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

app.add_middleware(SecureHeadersMiddleware)

app.add_middleware(RequestLogMiddleware)

app.include_router(installations.router, tags=["installations"])


@app.get("/")
def read_root():
    return {"message": f"Welcome to {APP_NAME}", "docs": "/docs"}


@app.get("/health")
def health_check():
    db_status = 'ok'
    db = SessionLocal()
    try:
        db.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        db_status = f"error: {str(e)}"
    finally:
        db.close()
    return {"db": db_status, "redis": cache.ping()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pvtracker.main:app", host="0.0.0.0", port=8000)
