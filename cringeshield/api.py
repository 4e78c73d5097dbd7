from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from cringeshield.routes.admin_routes import admin_routes
from cringeshield.routes.auth_routes import auth_routes
from cringeshield.routes.challenge_routes import challenge_routes
from cringeshield.routes.practice_routes import practice_routes
from cringeshield.routes.user_routes import user_routes
from cringeshield.routes.weekly_routes import weekly_routes
from cringeshield.config import SessionLocal, create_db, settings
from cringeshield.errors import ChallengeError
from cringeshield.services.practice_service import PracticeService
from cringeshield.utils.logger import configure_logging, set_request_id, clear_request_id
from fastapi import Request
from starlette.responses import Response, JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder

logger = configure_logging(log_dir=settings.log_dir, level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db()
    db = SessionLocal()
    try:
        seeded = PracticeService(db).seed_prompts()
        if seeded:
            logger.info("seeded speaking prompts count=%s", seeded)
    finally:
        db.close()
    logger.info("startup complete unlock_mode=%s", settings.weekly_unlock_mode)
    yield


app = FastAPI(title="CringeShield API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logger(request: Request, call_next):
    rid = set_request_id(request.headers.get("x-request-id"))
    try:
        logger.info("request start method=%s path=%s client=%s", request.method, request.url.path, request.client)
        response: Response = await call_next(request)
        logger.info("request end status=%s method=%s path=%s", response.status_code, request.method, request.url.path)
        response.headers["x-request-id"] = rid
        return response
    except Exception:
        logger.exception("request error method=%s path=%s", request.method, request.url.path)
        raise
    finally:
        clear_request_id()


@app.exception_handler(ChallengeError)
async def challenge_error_handler(request: Request, exc: ChallengeError) -> JSONResponse:
    logger.warning(
        "domain error type=%s status=%s method=%s path=%s message=%s",
        type(exc).__name__, exc.status_code, request.method, request.url.path, exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.exception("http error status=%s method=%s path=%s detail=\n%s", exc.status_code, request.method, request.url.path, exc.detail)
    else:
        logger.warning("http error status=%s method=%s path=%s detail=\n%s", exc.status_code, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("validation error method=%s path=%s errors=\n%s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal exception details to clients.
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


@app.get("/")
def read_root():
    return {"message": "CringeShield is Healthy"}

app.include_router(auth_routes, prefix="/api/auth")
app.include_router(challenge_routes, prefix="/api")
app.include_router(weekly_routes, prefix="/api")
app.include_router(practice_routes, prefix="/api")
app.include_router(user_routes, prefix="/api")
app.include_router(admin_routes, prefix="/api")

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
