"""Shared constants across the application"""


class VocabularyConstants:
    """Constants for vocabulary file parsing"""

    # Separator between term and meaning (first occurrence only)
    FIELD_SEPARATOR = "\t"
    FILE_ENCODING = "utf-8"


class DisplayConstants:
    """Constants for rendering entries"""

    # Joins term and meaning on the console, and reading and meaning in bodies
    SEPARATOR = " — "
    CODES_TEMPLATE = " ({codes})"


class SchedulerConstants:
    """Constants for the notification loop"""

    SECONDS_PER_MINUTE = 60
