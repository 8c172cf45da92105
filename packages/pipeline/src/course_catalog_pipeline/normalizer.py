"""Read the raw catalog and isolate the course listings section."""

import re
from pathlib import Path
from typing import Iterable

from course_catalog_common import CatalogFormatError, CatalogIOError, get_logger

logger = get_logger(__name__)

# Marks the start of the course listings in the catalog text
LISTINGS_SENTINEL = "Course Offerings\\"

WHITESPACE_RE = re.compile(r"\s+")

REPLACEMENT_CHAR = "\ufffd"


def read_catalog_lines(path: Path) -> list[str]:
    """Read the catalog document as a list of lines.

    The text is decoded as UTF-8. Bytes that are not valid UTF-8 (stray
    cp1252 punctuation, say) become U+FFFD and are counted in a warning
    rather than aborting the run.

    Raises:
        CatalogIOError: If the file is missing or cannot be read
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise CatalogIOError(f"Catalog text not found: {path}") from e
    except OSError as e:
        raise CatalogIOError(f"Cannot read catalog text {path}: {e}") from e

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("utf-8", errors="replace")
        # U+FFFD already encoded in the file is not a replacement
        replaced = text.count(REPLACEMENT_CHAR) - data.count(REPLACEMENT_CHAR.encode("utf-8"))
        logger.warning("undecodable_bytes_replaced", path=str(path), replaced=replaced)

    lines = text.splitlines()
    logger.info("catalog_read", path=str(path), lines=len(lines))
    return lines


def normalize_text(lines: Iterable[str]) -> str:
    """Join lines with a space and collapse every whitespace run to one space."""
    return WHITESPACE_RE.sub(" ", " ".join(lines))


def locate_listings(text: str, sentinel: str = LISTINGS_SENTINEL) -> str:
    """Return the text that follows the start-of-listings sentinel.

    Raises:
        CatalogFormatError: If the sentinel does not occur in ``text``
    """
    index = text.find(sentinel)
    if index < 0:
        raise CatalogFormatError(
            f"Start-of-listings marker {sentinel!r} not found in catalog text"
        )
    listings = text[index + len(sentinel) :]
    logger.info("listings_located", offset=index, length=len(listings))
    return listings
