"""
SMWS API Client - Pure I/O Operations

Fetches the whisky catalog from the skidhub scraping API. The response is
returned as-is; the only check performed is that the body is a JSON array.
"""

import asyncio
import logging
import time
from typing import List, Optional

import requests

from src.coreutils.env import env_get_float
from src.coreutils.request import new_session
from .schemas import Whiskey

logger = logging.getLogger(__name__)

# API Endpoints
WHISKIES_ENDPOINT = "https://api.skidhub.fr/scraping/smws/get-all"

REQUEST_TIMEOUT = env_get_float("SMWS_REQUEST_TIMEOUT", 30.0)

NETWORK_ERROR_MESSAGE = (
    "Network error: Unable to connect to the API. "
    "Make sure the server is running on localhost:3000"
)
INVALID_FORMAT_MESSAGE = "Invalid response format: expected array"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class ApiError(Exception):
    """Raised for any failure while fetching the catalog"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status={self.status!r})"


class SMWSAPIClient:
    """Pure API client for the SMWS catalog endpoint"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.session = session or new_session()
        self.timeout = timeout

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SMWSAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_whiskies(self) -> List[Whiskey]:
        """
        Fetch every whisky currently listed by the API

        Returns:
            List[Whiskey]: Raw catalog records, unchanged

        Raises:
            ApiError: On HTTP errors, connectivity failures, undecodable
                bodies, or a body that is not a JSON array
        """
        logger.info(f"Fetching from {WHISKIES_ENDPOINT}")
        start_time = time.time()

        try:
            response = self.session.get(WHISKIES_ENDPOINT, timeout=self.timeout)

            if not 200 <= response.status_code < 300:
                raise ApiError(
                    f"HTTP error! status: {response.status_code}",
                    response.status_code,
                )

            data = response.json()

            if not isinstance(data, list):
                raise ApiError(INVALID_FORMAT_MESSAGE)

            elapsed = time.time() - start_time
            logger.info(
                f"Fetched {len(data)} whiskies from {WHISKIES_ENDPOINT}: "
                f"{elapsed:.2f} seconds"
            )
            return data

        except ApiError as e:
            logger.error(f"Error fetching whiskies: {e}")
            raise

        except requests.exceptions.ConnectionError as e:
            logger.error(f"Could not reach {WHISKIES_ENDPOINT}: {e}")
            raise ApiError(NETWORK_ERROR_MESSAGE) from e

        except Exception as e:
            logger.error(f"Error fetching whiskies: {e}")
            raise ApiError(str(e) or UNKNOWN_ERROR_MESSAGE) from e


# Convenience functions for direct use
def fetch_whiskies() -> List[Whiskey]:
    """Convenience function to get the whole catalog"""
    with SMWSAPIClient() as client:
        return client.get_whiskies()


async def afetch_whiskies() -> List[Whiskey]:
    """Same as fetch_whiskies, run in a worker thread for asyncio callers"""
    return await asyncio.to_thread(fetch_whiskies)
