#!/usr/bin/env python3
"""
Exception hierarchy for fastaseek.
All custom exceptions should inherit from FastaSeekError.
"""
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger("fastaseek.errors")


class FastaSeekError(Exception):
    """Base exception for all fastaseek errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with error message and optional details

        Args:
            message: Error message
            details: Optional details dictionary with context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def log(self, level: int = logging.ERROR) -> None:
        """Log the error with additional details

        Args:
            level: Logging level (default: ERROR)
        """
        logger.log(level, f"{self.__class__.__name__}: {self.message}")
        if self.details:
            logger.log(level, f"Details: {self.details}")


class ConfigurationError(FastaSeekError):
    """Error related to configuration issues"""
    pass


class OpenError(FastaSeekError):
    """The backing file cannot be opened or read"""
    pass


class MalformedInputError(OpenError):
    """The header/sequence boundary cannot be established"""
    pass


class QueryError(FastaSeekError):
    """Base class for range query errors"""
    pass


class InvalidRangeError(QueryError):
    """Start is below position 1, or start > end"""
    pass


class OutOfBoundsError(QueryError):
    """End coordinate exceeds the sequence present in the file"""
    pass


class ReaderClosedError(QueryError):
    """Query issued against a reader with no open stream"""
    pass
