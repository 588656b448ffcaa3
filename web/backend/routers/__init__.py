"""API route handlers."""

from .cv import router as cv_router
from .proofreading import router as proofreading_router
from .guidance import router as guidance_router
