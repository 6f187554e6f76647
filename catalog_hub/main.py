import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_hub.api.v1 import api_router
from catalog_hub.core.config import settings
from catalog_hub.core.exceptions import CatalogError, RemoteApiError

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_logger = logging.getLogger(__name__)

app = FastAPI(title="Catalog Hub")

origins = [
    "http://localhost",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_status(exc: CatalogError) -> int:
    """HTTP status for a catalog error; remote 5xx statuses pass through."""
    if isinstance(exc, RemoteApiError) and exc.http_status and exc.http_status >= 500:
        return exc.http_status
    return exc.status_code


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    status = error_status(exc)
    if status >= 500:
        _logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status,
        content={"success": False, "error": exc.message, "status": status},
    )


def describe_validation_errors(errors) -> str:
    missing = [
        str(error["loc"][-1]) for error in errors
        if error.get("type") == "missing" and error.get("loc")
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    return f"Invalid {field or 'request'}: {first.get('msg', 'invalid value')}"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = describe_validation_errors(errors) if errors else "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": message, "status": 400},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    _logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error", "status": 500},
    )


app.include_router(api_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("catalog_hub.main:app", host="0.0.0.0", port=5010, reload=True)
