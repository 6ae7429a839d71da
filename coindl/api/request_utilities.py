"""
Common utilities for API request handling.
Provides the HTTP call, URL building and request logging used by the API clients.
"""

import requests
import time
import os
from typing import Dict, Any, Optional
from functools import wraps

from loguru import logger

from ..errors import NetworkError


def get_env_var(key: str, default: str = "") -> str:
    """Read an environment variable, stripped of surrounding whitespace"""
    return os.getenv(key, default).strip()


def log_api_request(func):
    """
    Decorator to log API requests and how long they took.

    Args:
        func: The request function to wrap, called with method and url

    Returns:
        Wrapped function with logging
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        method = kwargs.get('method', args[0] if len(args) > 0 else 'GET')
        url = kwargs.get('url', args[1] if len(args) > 1 else 'unknown')

        logger.debug(f"HTTP {method} {url}")

        start_time = time.time()
        try:
            response = func(*args, **kwargs)
            elapsed = time.time() - start_time
            logger.debug(f"HTTP response OK ({elapsed:.2f}s)")
            return response
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"HTTP error: {str(e)} ({elapsed:.2f}s)")
            raise

    return wrapper


def _error_body(response: Optional[requests.Response]) -> Any:
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


@log_api_request
def send_request(
    method: str,
    url: str,
    headers: Dict[str, str] = None,
    params: Dict[str, Any] = None,
    timeout: int = 10,
    retries: int = 1,
    backoff_factor: float = 0.5
) -> Any:
    """
    Make an HTTP request and return the decoded JSON body.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: URL to request
        headers: Optional headers
        params: Optional query parameters
        timeout: Request timeout in seconds
        retries: Number of attempts; 1 means no retry
        backoff_factor: Backoff factor between attempts

    Returns:
        Parsed JSON response

    Raises:
        NetworkError: On request failure or a body that is not JSON
    """
    attempts = max(1, retries)
    for attempt in range(attempts):
        try:
            response = requests.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                timeout=timeout
            )
            response.raise_for_status()

        except requests.exceptions.RequestException as e:
            if attempt < attempts - 1:
                logger.warning(f"Request failed (attempt {attempt+1}/{attempts}): {str(e)}")
                time.sleep(backoff_factor * (2 ** attempt))
                continue

            error_response = getattr(e, 'response', None)
            raise NetworkError(
                message=str(e),
                status_code=error_response.status_code if error_response is not None else None,
                response=_error_body(error_response)
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(
                message=f"Invalid JSON from {url}",
                status_code=response.status_code,
                response=response.text
            ) from e


def build_url(base_url: str, endpoint: str) -> str:
    """Join the API root and an endpoint with exactly one slash"""
    # Ensure there's no double slash between base_url and endpoint
    if base_url.endswith('/') and endpoint.startswith('/'):
        endpoint = endpoint[1:]
    elif not base_url.endswith('/') and not endpoint.startswith('/'):
        endpoint = '/' + endpoint

    return base_url + endpoint
