from .cv import CvRepository

__all__ = ['CvRepository']
