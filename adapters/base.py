#!/usr/bin/env python3
"""
Base Adapter for Quote Service Integrations
A foundational class for creating specific API adapters.
"""

import json
import logging
import requests
from typing import Dict, Any
from abc import ABC, abstractmethod

from models.exceptions import QuoteFetchError

logger = logging.getLogger(__name__)


class BaseAdapter(ABC):
    """Base adapter class for API integrations with common functionality."""

    def __init__(
        self, base_url: str = None, headers: Dict[str, str] = None, timeout: int = 30
    ):
        """
        Initialize the base adapter.

        Args:
            base_url: Base URL for API endpoints
            headers: Default headers for requests
            timeout: Request timeout in seconds
        """
        self.base_url = base_url or ""
        self.headers = headers or {}
        self.timeout = timeout
        self.session = requests.Session()

        # Set default headers
        if self.headers:
            self.session.headers.update(self.headers)

    def get(self, endpoint: str, params: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Perform a GET request to the specified endpoint.

        Args:
            endpoint: API endpoint (will be appended to base_url)
            params: Query parameters, form-url-encoded by requests

        Returns:
            JSON response as dictionary

        Raises:
            QuoteFetchError: on network errors, timeouts, non-2xx responses,
                malformed JSON or a payload rejected by validate_response
        """
        url = self._build_url(endpoint)
        try:
            logger.debug("GET %s params=%s", url, params)
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self._handle_error(f"Error fetching data from {url}: {e}")
            raise QuoteFetchError(f"Error fetching data from {url}: {e}") from e

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            self._handle_error(f"Error parsing JSON response from {url}: {e}")
            raise QuoteFetchError(f"Error parsing JSON response from {url}: {e}") from e

        if not self.validate_response(data):
            message = self.describe_error(data)
            self._handle_error(f"Invalid response from {url}: {message}")
            raise QuoteFetchError(f"Invalid response from {url}: {message}")

        return data

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from base URL and endpoint."""
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _handle_error(self, message: str) -> None:
        """Record a failure before it is raised. Callers report the exception itself."""
        logger.debug(message)

    def describe_error(self, response: Any) -> str:
        """Human-readable reason a response failed validation."""
        return "unexpected response format"

    @abstractmethod
    def validate_response(self, response: Any) -> bool:
        """
        Validate API response format.
        Must be implemented by subclasses.

        Args:
            response: Decoded JSON response

        Returns:
            True if response is valid, False otherwise
        """
        pass

