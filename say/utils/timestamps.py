from datetime import datetime
from types import MappingProxyType

from say.exceptions import TimeFormatNotFoundError

DEFAULT_TIMESTAMP_FORMAT_NAME = "web_service"

DATETIME_FORMATS = MappingProxyType({
    "long": "%m/%d/%Y %H:%M:%S %Z",                    # 06/03/2023 01:51:23 CDT
    DEFAULT_TIMESTAMP_FORMAT_NAME: "%Y%m%d%H%M%S",     # 20230603014511
})

def now():
    """Current local wall-clock time, timezone-aware so %Z renders."""
    return datetime.now().astimezone()

def format_string_for(format):
    """Named preset -> strftime string; anything containing '%' is used verbatim."""
    if "%" in str(format):
        return str(format)
    try:
        return DATETIME_FORMATS[format]
    except KeyError:
        raise TimeFormatNotFoundError(format) from None

def timestamp(time=None, format=DEFAULT_TIMESTAMP_FORMAT_NAME):
    if time is None:
        time = now()
    return time.strftime(format_string_for(format))
