from __future__ import annotations

import copy
import pickle

from hurricane.errors import FetchError, MalformedRowError


def test_fetch_error_keeps_cause_through_pickle_and_copy():
    error = FetchError("Failed to fetch hurricanes data from the URL.", cause="connection refused")
    for restored in (pickle.loads(pickle.dumps(error)), copy.copy(error)):
        assert isinstance(restored, FetchError)
        assert restored.cause == "connection refused"
        assert str(restored) == str(error)


def test_malformed_row_error_keeps_details_through_pickle_and_copy():
    error = MalformedRowError("Invalid occurrence count 'x' for May 2006", month="May", column="2006", value="x")
    for restored in (pickle.loads(pickle.dumps(error)), copy.deepcopy(error)):
        assert (restored.month, restored.column, restored.value) == ("May", "2006", "x")
        assert str(restored) == str(error)
