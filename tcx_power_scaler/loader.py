"""Loader for .tcx XML files."""

import fnmatch
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

import lxml.etree as ET

from .config import FILE_PATTERN, LEADING_JUNK
from .models import TcxDocument

logger = logging.getLogger(__name__)

WIDE_ENCODINGS = ('UTF-16', 'UTF-32', 'UCS-2', 'UCS-4')

XML_DECLARATION = re.compile(rb"<\?xml\b[^>]*\?>")
STANDALONE = re.compile(rb"\bstandalone\s*=\s*[\"'](yes|no)[\"']")


def create_xml_parser() -> ET.XMLParser:
    """Parser that keeps whitespace, comments and CDATA exactly as read."""
    return ET.XMLParser(
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        strip_cdata=False,
        resolve_entities=False,
        huge_tree=True
    )


def strip_leading_junk(data: bytes) -> bytes:
    """Drop a UTF-8 BOM, whitespace and control bytes before the XML starts.

    Some producers write stray bytes ahead of the XML declaration, which a
    conforming parser rejects. UTF-16/UTF-32 byte order marks start with
    0xFF or 0xFE and are left for the parser to handle.

    Args:
        data: Raw file content

    Returns:
        The content starting at its first significant byte
    """
    return data.lstrip(LEADING_JUNK)


def read_standalone(data: bytes) -> Optional[bool]:
    """Standalone flag from the XML declaration, or None if it has none."""
    declaration = XML_DECLARATION.match(data)
    if declaration is None:
        return None
    match = STANDALONE.search(declaration.group())
    if match is None:
        return None
    return match.group(1) == b'yes'


def uses_crlf(data: bytes) -> bool:
    """True when most line breaks are CRLF; mixed files get the majority ending."""
    crlf_count = data.count(b'\r\n')
    return crlf_count > 0 and crlf_count * 2 >= data.count(b'\n')


def load_document(filepath: Union[str, Path]) -> Optional[TcxDocument]:
    """Read and parse a .tcx file.

    Args:
        filepath: Path to the .tcx file

    Returns:
        TcxDocument, or None if the file is unreadable, empty or not XML
    """
    filepath = Path(filepath)

    try:
        raw = filepath.read_bytes()
    except OSError as e:
        logger.error(f"Error reading {filepath}: {e}")
        return None

    data = strip_leading_junk(raw)
    if not data:
        logger.error(f"File is empty: {filepath}")
        return None

    try:
        root = ET.fromstring(data, create_xml_parser())
    except ET.XMLSyntaxError as e:
        logger.error(f"Invalid XML in {filepath}: {e}")
        return None

    tree = root.getroottree()
    docinfo = tree.docinfo
    encoding = docinfo.encoding or 'UTF-8'
    wide = encoding.upper().startswith(WIDE_ENCODINGS)

    return TcxDocument(
        path=filepath,
        tree=tree,
        encoding=encoding,
        xml_declaration=data.startswith(b'<?xml') or wide,
        standalone=read_standalone(data),
        trailing_newline=data.endswith(b'\n') and not wide,
        crlf=uses_crlf(data) and not wide
    )


def find_tcx_files(folder: Union[str, Path, None]) -> List[Path]:
    """List the .tcx files directly inside a folder.

    Args:
        folder: Directory to scan (not recursed into)

    Returns:
        Matching file paths sorted by name; empty if the folder is blank
        or does not exist
    """
    if folder is None or not str(folder).strip():
        return []

    directory = Path(folder)
    if not directory.is_dir():
        return []

    files = [
        path for path in directory.iterdir()
        if path.is_file() and fnmatch.fnmatch(path.name, FILE_PATTERN)
    ]
    files.sort(key=lambda p: p.name)

    logger.debug(f"Found {len(files)} {FILE_PATTERN} files in {directory}")
    return files
