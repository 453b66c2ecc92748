"""
Dialect and service rules.

This file exists to keep the parser's fixed bytes and defaults in one place.
"""

DEFAULT_DELIMITER = b","
DEFAULT_QUOTE = b'"'
DEFAULT_ENCODING = "utf-8"

CARRIAGE_RETURN = 0x0D  # \r, always ignored
LINE_FEED = 0x0A  # \n, the record terminator

# Bytes that can never be a delimiter or quote character.
RESERVED_BYTES = (b"\r", b"\n")

READ_CHUNK_SIZE = 64 * 1024

UTF8_BOM = b"\xef\xbb\xbf"

ALLOWED_SUFFIXES = (".csv", ".tsv", ".txt")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# Special values accepted for `encoding` by the CLI and the HTTP service.
ENCODING_AUTO = "auto"
ENCODING_RAW = "raw"

# Codecs the byte-wise parser can decode fields with, by canonical
# codecs.lookup() name. In single-byte codecs every byte is a whole
# character; in UTF-8 every byte of a multi-byte character is >= 0x80.
SINGLE_BYTE_ENCODINGS = frozenset(
    ["ascii", "tis-620", "hp-roman8", "koi8-r", "koi8-u", "kz1048", "ptcp154"]
    + [f"iso8859-{n}" for n in (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14, 15, 16)]
    + [f"cp{n}" for n in range(1250, 1259)]
    + [f"cp{n}" for n in (437, 737, 775, 850, 852, 855, 857, 858, 860, 861, 862, 863, 864, 865, 866, 869, 874, 1125)]
    + ["mac-roman", "mac-latin2", "mac-cyrillic", "mac-greek", "mac-iceland", "mac-turkish"]
)
MULTI_BYTE_ENCODINGS = frozenset(["utf-8"])
