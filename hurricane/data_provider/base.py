from abc import ABC, abstractmethod
from typing import Iterator


class HurricaneDataSource(ABC):
    @abstractmethod
    def iter_chunks(self) -> Iterator[str]:
        """
        Yields the raw hurricanes table as text chunks.
        A chunk may end in the middle of a line or hold several lines.
        Format:
            "Month", "2005", "2006", ..., "Average"
            "May",  0,  1, ..., 0.1
        """

    def fetch_text(self) -> str:
        return "".join(self.iter_chunks())
