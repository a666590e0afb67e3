"""FastAPI application entrypoint for the Personnel API."""
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from api.database import init_db  # noqa: E402 (config must see .env values)
from api.routers import employees, health  # noqa: E402
from config import API_PREFIX, API_VERSION, CORS_ORIGINS, SEED_DEMO_DATA  # noqa: E402
from logger_config import setup_logger  # noqa: E402

logger = setup_logger("api.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if SEED_DEMO_DATA:
        from seed_employees import seed

        n = seed()
        if n:
            logger.info("Seeded %d demo employees on first start", n)
    yield


app = FastAPI(title="Personnel API", version=API_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report wrong JSON types as a 400 field-error map instead of FastAPI's 422."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc", ())
        # ("body", "salary") -> "salary", ("path", "employee_id") -> "employee_id"
        if err.get("type") == "json_invalid" or len(loc) < 2:
            field = "body"
        else:
            field = str(loc[1])
        errors.setdefault(field, err.get("msg", "Invalid value"))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


app.include_router(health.router)
app.include_router(employees.router, prefix=API_PREFIX, tags=["employees"])
