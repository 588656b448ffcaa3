#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from etl.importer.errors import DocumentImportError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class CvNotFoundException(ServiceException):
    """Raised when a user has no saved CV."""
    pass


class InvalidCvPayloadException(ServiceException):
    """Raised when a request body is missing CV data."""
    pass


class AuthenticationRequiredException(ServiceException):
    """Raised when no authenticated user is attached to the request."""
    pass


def _error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.
    
    Args:
        request: The FastAPI request.
        exc: The service exception.
    
    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, CvNotFoundException):
        status_code = 404
    elif isinstance(exc, InvalidCvPayloadException):
        status_code = 400
    elif isinstance(exc, AuthenticationRequiredException):
        status_code = 401

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"Service error in {request.url.path}: {exc}")

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def document_import_exception_handler(
    request: Request,
    exc: DocumentImportError
) -> JSONResponse:
    """Import failures carry a user-facing message and are always a bad request."""
    logger.warning(f"Document import rejected in {request.url.path}: {exc}")
    return _error_response(400, str(exc), exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    
    Args:
        request: The FastAPI request.
        exc: The HTTP exception.
    
    Returns:
        JSONResponse with error details.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    
    Args:
        request: The FastAPI request.
        exc: The exception.
    
    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")
    return _error_response(500, "Internal server error", "InternalError")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(DocumentImportError, document_import_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
