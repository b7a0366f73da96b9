"""Processing of many selections at once."""

from glossfix.processing.batch import clean_many

__all__ = ["clean_many"]
