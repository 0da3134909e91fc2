import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from backend.core import config
from backend.core.errors import ServiceError
from backend.database import Base, engine
from backend.middleware.security_headers import SecurityHeadersMiddleware
from backend.models import module, user  # noqa: F401
from backend.routes import auth_routes, module_routes

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

config.validate_runtime_config()

app = FastAPI()

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials='*' not in config.CORS_ALLOW_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.on_event('startup')
def initialize_database() -> None:
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')


@app.exception_handler(ServiceError)
def service_error_handler(_: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={'msg': exc.message})


@app.exception_handler(HTTPException)
def http_error_handler(_: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={'msg': exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
def validation_error_handler(_: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0]['msg'] if errors else 'Invalid request.'
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'msg': message})


@app.exception_handler(SQLAlchemyError)
def database_error_handler(_: Request, exc: SQLAlchemyError):
    logger.error('Database error: %s', exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={'msg': 'Database unavailable.'},
    )


@app.get('/')
def root():
    return {'status': 'Learning Modules API Running'}


app.include_router(auth_routes.router, prefix='/auth')
app.include_router(module_routes.router, prefix='/modules')
