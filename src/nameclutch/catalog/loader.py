"""Load and save domains.json."""

import json
import logging
from pathlib import Path

from nameclutch.paths import editable_catalog_path, fallback_catalog_path

logger = logging.getLogger(__name__)


def empty_catalog() -> dict:
    return {"domains": []}


def read_catalog(path: Path | str) -> dict:
    """Read one catalog document, raising on a missing or malformed file.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: the file is not JSON or has no ``domains`` list.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not isinstance(data.get("domains"), list):
        raise ValueError(f"{path}: expected an object with a 'domains' list")
    return data


def load_catalog(
    path: Path | str | None = None,
    fallback: Path | str | None = None,
) -> dict:
    """Load the catalog, preferring the editable file.

    Args:
        path: Editable domains.json. Defaults to data/domains.json.
        fallback: Read-only domains.json used when ``path`` cannot be read.
            Defaults to public/domains.json.

    Returns:
        Parsed catalog dict; ``{"domains": []}`` when neither file is usable.
    """
    primary = Path(path) if path else editable_catalog_path()
    secondary = Path(fallback) if fallback else fallback_catalog_path()

    try:
        return read_catalog(primary)
    except (OSError, ValueError) as e:
        logger.debug("Editable catalog unavailable (%s), trying %s", e, secondary)

    try:
        return read_catalog(secondary)
    except (OSError, ValueError) as e:
        logger.warning("No usable catalog at %s or %s: %s", primary, secondary, e)
    return empty_catalog()


def save_catalog(data: dict, path: Path | str | None = None) -> None:
    """Write domains.json back to disk with consistent formatting.

    Args:
        data: Catalog dict to write.
        path: Path to write to. Defaults to the editable catalog location.
    """
    catalog_path = Path(path) if path else editable_catalog_path()
    with open(catalog_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
