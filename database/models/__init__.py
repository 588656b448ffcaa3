from .base import Base
from .cv import CvRecord

__all__ = [
    'Base',
    'CvRecord',
]
