from pathlib import Path
from typing import Iterator, Optional, Union

from config import settings
from hurricane.data_provider.base import HurricaneDataSource
from hurricane.data_provider.http_provider import HttpSheetProvider
from hurricane.errors import FetchError, StreamError
from hurricane.logger import get_logger

logger = get_logger(__name__)


class FileSheetProvider(HurricaneDataSource):
    """Reads a hurricanes sheet saved on disk, for offline runs."""

    def __init__(self, path: Union[str, Path], chunk_size: Optional[int] = None):
        self.path = Path(path)
        self.chunk_size = chunk_size if chunk_size is not None else settings.get_chunk_size()

    def iter_chunks(self) -> Iterator[str]:
        try:
            handle = open(self.path, "r", encoding="utf-8", newline="")
        except OSError as e:
            logger.error(f"Error opening data file {self.path}: {e}")
            raise FetchError(f"Failed to read hurricanes data from {self.path}.", cause=str(e)) from e

        with handle:
            while True:
                try:
                    chunk = handle.read(self.chunk_size)
                except (OSError, UnicodeDecodeError) as e:
                    logger.error(f"Error reading data file {self.path}: {e}")
                    raise StreamError(f"Hurricanes data file could not be read: {e}") from e
                if not chunk:
                    break
                yield chunk


def provider_for(location: Optional[str] = None) -> HurricaneDataSource:
    """Picks the HTTP provider for http(s) URLs (or no location) and the file provider otherwise."""
    if not location or location.startswith(("http://", "https://")):
        return HttpSheetProvider(location)
    return FileSheetProvider(location)
