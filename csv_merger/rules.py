"""
Deterministic merge rules.

These are fixed by design: the prefix and the chunk size are not read from
settings.
"""

COUNTRY_PREFIX = "971"
STRIPPED_LEADING_CHAR = "0"
CHUNK_SIZE = 9000

LINE_SEPARATOR = "\n"
OUTPUT_ENCODING = "utf-8"
EXPORT_MEDIA_TYPE = "text/csv"
EXPORT_FILENAME = "Numbers_{date}_part_{index}.csv"
EXPORT_DATE_FORMAT = "%d%m%y"
