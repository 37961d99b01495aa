"""🏷️ Metadata Loader - Optional key/value annotations for a document."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import MetadataDecodeError, MetadataReadError

# A JSON object of strings, or null.
_METADATA_ADAPTER = TypeAdapter(dict[str, str] | None)


def file_exists(path: Path | str | None) -> bool:
    """True when ``path`` is non-empty and names an existing regular file."""
    if not path:
        return False
    return Path(path).is_file()


def load_metadata(path: Path | str | None) -> dict[str, str]:
    """Load a flat JSON object of string keys to string values.

    Args:
        path: Metadata file (may be empty or missing)

    Returns:
        The decoded mapping, or {} when there is no file, it is empty, or it
        holds JSON null

    Raises:
        MetadataReadError: The file exists but cannot be read
        MetadataDecodeError: The content is not UTF-8 or not a flat
            string-to-string object
    """
    if not file_exists(path):
        return {}

    try:
        content = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MetadataDecodeError(path, f"failed to unmarshal: {e}") from e
    except OSError as e:
        raise MetadataReadError(
            path, f"unable to read content from metadata file: {e}"
        ) from e

    if not content.strip():
        return {}

    try:
        data = _METADATA_ADAPTER.validate_json(content)
    except ValidationError as e:
        raise MetadataDecodeError(path, f"failed to unmarshal: {e}") from e

    return data or {}
