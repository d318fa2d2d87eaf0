from typing import Iterator, Optional

import requests

from config import settings
from hurricane.data_provider.base import HurricaneDataSource
from hurricane.errors import FetchError, StreamError
from hurricane.logger import get_logger

logger = get_logger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch hurricanes data from the URL."


class HttpSheetProvider(HurricaneDataSource):
    """
    Streams the hurricanes sheet over HTTP.
    Each call to iter_chunks() performs exactly one GET request; there are no retries.
    """

    def __init__(self, url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 chunk_size: Optional[int] = None):
        self.url = url or settings.get_sheet_url()
        self.timeout = timeout if timeout is not None else settings.get_request_timeout()
        self.chunk_size = chunk_size if chunk_size is not None else settings.get_chunk_size()

    def _open(self) -> requests.Response:
        try:
            response = requests.get(self.url, stream=True, timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching data: {e}")
            raise FetchError(FETCH_FAILED_MESSAGE, cause=str(e)) from e

    def iter_chunks(self) -> Iterator[str]:
        response = self._open()
        # The sheet is served without a charset; requests would otherwise guess latin-1.
        if response.encoding is None or response.encoding.lower() == "iso-8859-1":
            response.encoding = "utf-8"
        try:
            for chunk in response.iter_content(chunk_size=self.chunk_size, decode_unicode=True):
                if chunk:
                    yield chunk
        except requests.exceptions.RequestException as e:
            logger.error(f"Error reading data stream from {self.url}: {e}")
            raise StreamError(f"Hurricanes data stream was interrupted: {e}") from e
        finally:
            response.close()


def fetch_sheet(url: Optional[str] = None) -> str:
    """Fetches the whole hurricanes sheet as text."""
    return HttpSheetProvider(url).fetch_text()
