"""
Base class for the HTTP API clients.
Provides standardized request handling and error context.
"""

from abc import ABC
from typing import Dict, Any, Optional
from loguru import logger

from ..config import REQUEST_TIMEOUT
from ..errors import NetworkError
from .request_utilities import send_request, build_url


class BaseAPI(ABC):
    """
    Base class for API clients with common functionality.

    Provides:
    - HTTP request methods
    - Standardized error handling
    - Optional API key header
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        api_key_header: str = "X-API-KEY",
        timeout: int = REQUEST_TIMEOUT
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for API requests
            api_key: Optional API key for authentication
            api_key_header: Header the API key is sent in
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.default_headers = {"Accept": "application/json"}

        if api_key:
            self.default_headers[api_key_header] = api_key

    def request(
        self,
        method: str,
        endpoint: str,
        params: Dict[str, Any] = None,
        headers: Dict[str, Any] = None
    ) -> Any:
        """
        Make a request to the API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint
            params: Query parameters
            headers: Additional headers

        Returns:
            Decoded JSON response

        Raises:
            NetworkError: On request failure
        """
        request_headers = self.default_headers.copy()
        if headers:
            request_headers.update(headers)

        # Log the request (not including sensitive headers)
        logger.debug(f"API Request: {method} {endpoint}")

        url = build_url(self.base_url, endpoint)
        filtered_params = {k: v for k, v in (params or {}).items() if v is not None}

        try:
            return send_request(
                method=method,
                url=url,
                headers=request_headers,
                params=filtered_params or None,
                timeout=self.timeout
            )
        except NetworkError as e:
            logger.error(f"API Error: {e.message} (Status: {e.status_code})")

            # Re-raise with additional context
            raise NetworkError(
                message=f"{method} {endpoint} failed: {e.message}",
                status_code=e.status_code,
                response=e.response
            ) from e

    def get(self, endpoint: str, params: Dict[str, Any] = None, **kwargs) -> Any:
        """Make a GET request to the API."""
        return self.request("GET", endpoint, params=params, **kwargs)
