"""
Error kinds raised by the routers and services.
Each one is an HTTPException so FastAPI renders it as {"detail": message}.
"""
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError, PyMongoError

logger = logging.getLogger("database")


class Unauthenticated(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(HTTPException):
    def __init__(self, detail: str = "Access denied"):
        super().__init__(status_code=403, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=404, detail=detail)


class NoMoreQuestions(NotFound):
    def __init__(self, detail: str = "No more questions available"):
        super().__init__(detail=detail)


class AlreadyAnswered(HTTPException):
    def __init__(self, detail: str = "Question already answered"):
        super().__init__(status_code=400, detail=detail)


class InvalidOperation(HTTPException):
    def __init__(self, detail: str = "Invalid operation"):
        super().__init__(status_code=400, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=409, detail=detail)


class Timeout(HTTPException):
    def __init__(self, detail: str = "Database operation timed out"):
        super().__init__(status_code=504, detail=detail)


class Internal(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=500, detail=detail)


async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    error = Conflict("Resource already exists")
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


async def store_error_handler(request: Request, exc: PyMongoError):
    if exc.timeout:
        logger.warning("Store timeout on %s %s", request.method, request.url.path)
        error = Timeout()
    else:
        logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        error = Internal()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
