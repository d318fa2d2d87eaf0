from typing import Dict, Optional

from hurricane.data_provider.base import HurricaneDataSource
from hurricane.data_provider.http_provider import HttpSheetProvider
from hurricane.errors import HurricaneDataError
from hurricane.logger import get_logger
from hurricane.possibility import estimate_all, estimate_possibility
from hurricane.table_parser import Dataset, parse_hurricanes_data
from hurricane.transformers import TransformedSummary, transform_hurricanes_data

logger = get_logger(__name__)


class HurricaneService:
    """
    Service responsible for loading the hurricanes sheet and answering questions about it.

    Nothing is cached: every public call fetches and parses the sheet again and works
    on its own freshly built dataset, so concurrent callers never share state.
    """

    def __init__(self, provider: Optional[HurricaneDataSource] = None):
        self._provider = provider

    def _source(self) -> HurricaneDataSource:
        # Built per load so SHEET_URL is re-read from the environment each time.
        return self._provider if self._provider is not None else HttpSheetProvider()

    def load(self) -> Dataset:
        source = self._source()
        return parse_hurricanes_data(source.iter_chunks())

    def get_hurricanes(self) -> Dataset:
        """Returns the full parsed dataset. Errors are logged and re-raised."""
        try:
            return self.load()
        except HurricaneDataError as e:
            logger.error(f"Error getting hurricanes data: {e}")
            raise

    def hurricane_possibility(self, month: str) -> Optional[float]:
        """
        Possibility (in %) of hurricanes in the given month.
        Returns None when the data cannot be loaded or has no row for the month.
        """
        try:
            dataset = self.load()
            possibility = estimate_possibility(month, dataset)
        except HurricaneDataError as e:
            logger.error(f"Error getting hurricanes data: {e}")
            return None

        if possibility is None:
            logger.warning(f"No hurricanes data for {month}")
        return possibility

    def get_summary(self) -> TransformedSummary:
        return transform_hurricanes_data(self.get_hurricanes())

    def get_outlook(self) -> Dict[str, float]:
        return estimate_all(self.get_hurricanes())
