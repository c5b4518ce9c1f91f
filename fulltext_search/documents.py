"""
Document records and corpus loading.

Documents are read from an XML abstract dump (optionally gzip-compressed)
of the form::

    <feed>
      <doc>
        <title>...</title>
        <url>...</url>
        <abstract>...</abstract>
      </doc>
      ...
    </feed>

Each document receives its zero-based position in the dump as its ID.
"""

import gzip
import logging
import xml.etree.ElementTree as ET
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence, Union

from .exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A single immutable corpus entry."""

    id: int
    title: str
    url: str
    text: str


def _record_fields(record: Union[Mapping[str, Any], Sequence[str]]):
    if isinstance(record, Mapping):
        text = record.get("text")
        if text is None:
            text = record.get("abstract", "")
        return record.get("title", "") or "", record.get("url", "") or "", text or ""
    if isinstance(record, (str, bytes)) or not isinstance(record, Sequence) or len(record) != 3:
        raise DocumentLoadError(f"Expected a mapping or a (title, url, text) record, got {record!r}")
    title, url, text = record
    return title, url, text


def documents_from_records(records: Iterable[Union[Mapping[str, Any], Sequence[str]]]) -> List[Document]:
    """
    Build documents from plain records, assigning IDs by position.

    Args:
        records: Mappings with ``title``/``url``/``text`` (or ``abstract``)
            keys, or ``(title, url, text)`` tuples.

    Returns:
        List of documents whose IDs are 0..n-1.

    Raises:
        DocumentLoadError: If a record is neither a mapping nor a
            three-item sequence.
    """
    documents = []
    for doc_id, record in enumerate(records):
        title, url, text = _record_fields(record)
        documents.append(Document(id=doc_id, title=title, url=url, text=text))
    return documents


def _open_dump(path: Path):
    if path.suffix == ".gz":
        return gzip.open(path, "rb")
    return open(path, "rb")


def load_documents(path: Union[str, Path]) -> List[Document]:
    """
    Load documents from an XML abstract dump.

    Args:
        path: Path to a ``.xml`` or ``.xml.gz`` file.

    Returns:
        List of documents in dump order.

    Raises:
        DocumentLoadError: If the file cannot be opened, decompressed or parsed.
    """
    path = Path(path)
    records = []
    try:
        with _open_dump(path) as f:
            root = None
            for event, elem in ET.iterparse(f, events=("start", "end")):
                if event == "start":
                    if root is None:
                        root = elem
                    continue
                if elem.tag != "doc":
                    continue
                records.append({
                    "title": elem.findtext("title", default=""),
                    "url": elem.findtext("url", default=""),
                    "text": elem.findtext("abstract", default=""),
                })
                # Processed docs are released from the root
                root.clear()
    except (OSError, EOFError, zlib.error, ET.ParseError) as e:
        logger.error("Failed to load documents from %s: %s", path, e)
        raise DocumentLoadError(f"Could not load documents from {path}: {e}") from e

    documents = documents_from_records(records)
    logger.info("Loaded %d documents from %s", len(documents), path)
    return documents
