import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse

from chesstime.routes import fetch
from chesstime.schemas import HealthResponse

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("chesstime.main")

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="chesstime")


# 🌟 Log every inbound request
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
    return response


app.include_router(fetch.router)


@app.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def root():
    return FileResponse(STATIC_DIR / "index.html")
