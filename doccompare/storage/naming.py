"""Stored-name scheme for uploaded documents.

``assign_stored_name`` appends a millisecond timestamp to the base name so
that repeated uploads of the same file do not clash; ``recover_original_name``
strips it again for display. The pair is a best-effort inverse only:

* two uploads of the same name within the same millisecond get the same
  stored name, and the later write replaces the earlier file;
* a file placed in storage without a timestamp whose name has an
  underscore before the extension (``scan_final.pdf``) is displayed as
  ``scan.pdf``;
* names without an extension (``README_1000``) are not recovered at all.

The original name is never used as a lookup key.
"""

import time

TIMESTAMP_SEPARATOR = "_"
EXTENSION_SEPARATOR = "."


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def split_extension(file_name: str) -> tuple[str, str]:
    """Split ``file_name`` into ``(base, ext)`` at the last dot of its final component.

    ``ext`` keeps the dot. Names whose only dot is the leading one (``.env``)
    have no extension.
    """
    slash = max(file_name.rfind("/"), file_name.rfind("\\"))
    basename = file_name[slash + 1:]
    dot = basename.rfind(EXTENSION_SEPARATOR)
    if dot <= 0:
        return basename, ""
    return basename[:dot], basename[dot:]


def assign_stored_name(original_name: str, now_millis: int) -> str:
    """Return ``<base>_<now_millis><ext>`` for an uploaded file's original name."""
    base, ext = split_extension(original_name)
    return f"{base}{TIMESTAMP_SEPARATOR}{now_millis}{ext}"


def recover_original_name(stored_name: str) -> str:
    """Strip the timestamp suffix from a stored name.

    Names without an underscore before their final dot did not go through
    ``assign_stored_name`` and are returned unchanged.
    """
    underscore = stored_name.rfind(TIMESTAMP_SEPARATOR)
    dot = stored_name.rfind(EXTENSION_SEPARATOR)
    if underscore > 0 and dot > underscore:
        return stored_name[:underscore] + stored_name[dot:]
    return stored_name
