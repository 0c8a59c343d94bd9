"""Rapid7 log search API client module."""

from typing import Optional
import requests
import structlog
from ..config import Rapid7Config
from .builder import OutboundRequest

logger = structlog.get_logger(__name__)


class Rapid7ConnectionError(Exception):
    """Exception raised when a request to Rapid7 cannot complete."""
    pass


class Rapid7Client:
    """HTTP client for the Rapid7 InsightOps log REST API."""

    def __init__(self, config: Rapid7Config, session: Optional[requests.Session] = None):
        """Initialize Rapid7 client.

        Args:
            config: Rapid7 configuration
            session: Optional requests session to reuse
        """
        self.config = config
        self._session = session

    def get_session(self) -> requests.Session:
        """Get or create the underlying requests session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def send(self, outbound: OutboundRequest) -> requests.Response:
        """Perform the outbound request and return the raw response.

        Non-2xx responses are returned, not raised.

        Raises:
            Rapid7ConnectionError: If the request never completed (DNS, TCP, TLS)
        """
        logger.debug("Sending Rapid7 request", method=outbound.method, url=outbound.url)

        try:
            response = self.get_session().request(
                outbound.method,
                outbound.url,
                headers=dict(outbound.headers),
            )
        except requests.RequestException as e:
            logger.warning("Rapid7 request failed", url=outbound.url, error=str(e))
            raise Rapid7ConnectionError(str(e))

        logger.debug("Rapid7 response received",
                     url=outbound.url,
                     status=response.status_code,
                     content_type=response.headers.get("content-type"))
        return response

    def close(self) -> None:
        """Close the underlying session."""
        if self._session is not None:
            try:
                self._session.close()
            except Exception as e:
                logger.warning("Error during session close", error=str(e))
            finally:
                self._session = None
