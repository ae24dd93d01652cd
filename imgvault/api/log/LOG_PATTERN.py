import re

# [ISO_TIMESTAMP] [domain] LEVEL: message
LOG_PATTERN = re.compile(
    r"^\[(?P<timestamp>[^\]]+)\]\s*\[(?P<domain>\w+)\]\s*(?P<level>DEBUG|INFO|WARN|ERROR):\s*(?P<message>.*)$",
    re.IGNORECASE,
)
