import datetime
import sys
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
import streamlit as st

# Add the project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Imports from core
from hurricane.constants import MONTH_NAMES
from hurricane.data_provider.file_provider import provider_for
from hurricane.hurricane_service import HurricaneService
from hurricane.months import next_month
from hurricane.transformers import TransformedSummary

CACHE_TTL_SECONDS = 15 * 60


def _service(location: Optional[str]) -> HurricaneService:
    return HurricaneService(provider_for(location) if location else None)


# Each cached call runs its own load, so sessions never share a dataset instance.
@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def get_summary_cached(location: Optional[str]) -> TransformedSummary:
    """Year and month totals. Cached."""
    return _service(location).get_summary()


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def get_outlook_cached(location: Optional[str]) -> Dict[str, float]:
    """Possibility for every month. Cached."""
    return _service(location).get_outlook()


def default_month() -> str:
    """The month after the current one, which is what users usually ask about."""
    return next_month(MONTH_NAMES[datetime.datetime.now().month - 1])


def outlook_to_frame(outlook: Dict[str, float]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Month": month, "Possibility (%)": value} for month, value in outlook.items()],
        columns=["Month", "Possibility (%)"],
    )
