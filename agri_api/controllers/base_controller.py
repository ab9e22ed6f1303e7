"""
Base controller interface for API endpoints.

This module provides the abstract base class for all API controllers in the
agricultural price dashboard API. It enforces consistent patterns and provides
common functionality across all endpoint handlers.

Tags:
    - base-controller
    - abstract-interface
    - mvc-pattern
    - error-handling

Architecture:
    All controllers inherit from BaseController and must implement:
    - _setup_routes(): Define endpoint routes and handlers
    - Optional: Custom error handling

Usage:
    ```python
    class MyController(BaseController):
        def _setup_routes(self):
            @self.router.get("/my-endpoint")
            async def my_endpoint():
                return {"message": "Hello World"}
    ```
"""

from abc import ABC, abstractmethod
from fastapi import APIRouter, HTTPException
from typing import Optional


class BaseController(ABC):
    """
    Abstract base controller for consistent API endpoint patterns.

    Attributes:
        router (APIRouter): FastAPI router instance for endpoint registration

    Methods:
        _setup_routes(): Abstract method for route definition (must implement)
        handle_exception(): Standardized exception handling with context
    """

    def __init__(self):
        """
        Initialize controller with FastAPI router.

        Creates a new APIRouter instance and calls _setup_routes() to register
        all endpoint handlers defined by the concrete controller implementation.
        """
        self.router = APIRouter()
        self._setup_routes()

    @abstractmethod
    def _setup_routes(self):
        """Setup routes for this controller."""
        pass

    def handle_exception(self, e: Exception, context: Optional[str] = None) -> None:
        """
        Handle exceptions consistently across all controllers.

        HTTP errors raised by services pass through unchanged; anything else
        becomes an HTTP 500 carrying the context message.

        Args:
            e (Exception): The exception that occurred
            context (Optional[str]): Where the error occurred

        Raises:
            HTTPException: Always
        """
        if isinstance(e, HTTPException):
            raise e
        error_message = f"{context}: {str(e)}" if context else str(e)
        raise HTTPException(status_code=500, detail=error_message)
