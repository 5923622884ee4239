
# Lifecycle events emitted by once-cells and accessors
EVENT_COLORS = {
    'created': '<fg #52B69A>',
    'reused': '<fg #168AAD>',
    'failed': '<fg #DC2F02>',
}
FALLBACK_EVENT_COLOR = '<fg #99D98C>'

DEFAULT_FUNCTION_COLOR = '<fg #219ebc>'
DEFAULT_CLASS_COLOR = '<fg #a8dadc>'
RESET_COLOR = '\x1b[0m'

LOGLEVEL_MAPPING = {
    50: 'CRITICAL',
    40: 'ERROR',
    30: 'WARNING',
    25: 'SUCCESS',
    20: 'INFO',
    10: 'DEBUG',
    5: 'TRACE',
}

REVERSE_LOGLEVEL_MAPPING = {v: k for k, v in LOGLEVEL_MAPPING.items()}
