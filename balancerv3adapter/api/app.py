import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from balancerv3adapter.api.routes import describe_service, router
from balancerv3adapter.exceptions import (
    AdapterError,
    FormatError,
    NotFoundError,
    UnsupportedChainError,
)
from balancerv3adapter.misc.info import SERVICE_TITLE, SERVICE_VERSION
from balancerv3adapter.service.adapter_factory import AdapterFactory

logger = logging.getLogger(__name__)


def _status_code_for(error: AdapterError) -> int:
    if isinstance(error, (UnsupportedChainError, FormatError)):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    return 500


async def adapter_error_handler(request: Request, exc: AdapterError) -> JSONResponse:
    status_code = _status_code_for(exc)
    if status_code >= 500:
        logger.error(f'{request.method} {request.url.path} failed: {exc}')
    else:
        logger.info(f'{request.method} {request.url.path} rejected: {exc}')
    return JSONResponse(status_code=status_code, content={'error': str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f'{request.method} {request.url.path} failed')
    return JSONResponse(status_code=500, content={'error': 'Internal server error'})


def create_app(factory: AdapterFactory) -> FastAPI:
    app = FastAPI(title=SERVICE_TITLE, version=SERVICE_VERSION)
    app.state.adapter_factory = factory
    app.state.service_name = factory.envs.SERVICE_NAME

    app.add_exception_handler(AdapterError, adapter_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(router, prefix='/api')

    @app.get('/')
    def read_root():
        return describe_service()

    return app
