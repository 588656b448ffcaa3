"""Business logic services."""

from .cv_service import CvService, review_cv
from .import_service import get_document_importer, to_import_response
