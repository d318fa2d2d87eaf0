DEFAULT_SHEET_URL = "https://people.sc.fsu.edu/~jburkardt/data/csv/hurricanes.csv"

MONTH_NAMES = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

MONTH_HEADER = "Month"
AVERAGE_KEY = "Average"

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CHUNK_SIZE = 1024
