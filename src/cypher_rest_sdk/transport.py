"""
HTTP transport

A single synchronous POST per query. There is no retry and no pooling
beyond what the underlying requests.Session does on its own.
"""

import logging
from typing import Optional, Tuple

import requests

from .error import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class HttpTransport:
    """
    Posts JSON bodies to the query endpoint

    Pass a configured requests.Session to control adapters, proxies and
    the like; pass timeout to bound the wait for the server. The session is
    used for every post, so one transport should not be shared between threads.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def post(self, url: str, body: bytes) -> Tuple[int, bytes]:
        """
        POST an already serialized JSON body

        Args:
            url: Endpoint URL
            body: UTF-8 encoded JSON document

        Returns:
            Tuple of (status code, raw response body)

        Raises:
            TransportError: If the request could not be sent or the body read
        """
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            response = self._session.post(url, data=body, headers=JSON_HEADERS, timeout=self._timeout)
            content = response.content
        except requests.RequestException as e:
            raise TransportError.from_request_exception(e) from e

        logger.debug("Response %d from %s (%d bytes)", response.status_code, url, len(content))
        return response.status_code, content

    def close(self) -> None:
        """Close the underlying requests session"""
        self._session.close()


__all__ = ['HttpTransport']
