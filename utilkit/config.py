"""
Configuration constants for the file and geometry utilities.
"""
import sys

# --- Hashing & Comparison ---
HASH_CHUNK_SIZE = 64 * 1024  # 64 KB chunks for reading
COMPARE_BUFFER_SIZE = 4096

# Names accepted by FileMetadata.digest(), mapped to hashlib constructors
DIGEST_ALGORITHMS = ('md5', 'sha1', 'sha256', 'sha384', 'sha512')

# --- Copy Conflict Resolution ---
MAX_COPY_SUFFIX = 1000
EQUAL_MARKER = "_equal"

# --- MIME Types ---
# Lookup is by lowercased extension; anything else is DEFAULT_MIME_TYPE
DEFAULT_MIME_TYPE = 'application/octet-stream'

_WORD_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
_SHEET_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

MIME_TYPES = {
    '.txt': 'text/plain',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.png': 'image/png',
    '.gif': 'image/gif',
    '.pdf': 'application/pdf',
    '.doc': _WORD_TYPE,
    '.docx': _WORD_TYPE,
    '.xls': _SHEET_TYPE,
    '.xlsx': _SHEET_TYPE,
    '.exe': 'application/vnd.microsoft.portable-executable',
    '.zip': 'application/zip',
}

# --- Path Validation ---
if sys.platform == 'win32':
    INVALID_PATH_CHARS = frozenset('"<>|\0' + ''.join(chr(c) for c in range(1, 32)))
else:
    INVALID_PATH_CHARS = frozenset('\0')
