"""Unified activity log.

Single shared logfile at $IMGVAULT_HOME/logfile with format:
[TIMESTAMP] [DOMAIN] LEVEL: message
"""

from .._output_schemas.log import LogStatusOutput
from .append_log import append_log
from .read_log_entries import read_log_entries

__all__ = ["LogStatusOutput", "append_log", "read_log_entries"]
