"""Backup and write-back of scaled .tcx files."""

import logging
import shutil
import uuid
from pathlib import Path
from typing import Optional, Union

import lxml.etree as ET

from .config import BACKUP_SUFFIX
from .errors import BackupError, WriteError
from .models import TcxDocument

logger = logging.getLogger(__name__)

MAX_BACKUP_ATTEMPTS = 10


def backup_path_for(filepath: Union[str, Path]) -> Path:
    """Pick the name for a backup of a file.

    Args:
        filepath: The file about to be overwritten

    Returns:
        <filepath>.original, or <filepath>.original.<token> when that
        name is already taken
    """
    filepath = Path(filepath)
    backup = filepath.with_name(filepath.name + BACKUP_SUFFIX)
    if backup.exists():
        backup = backup.with_name(f"{backup.name}.{uuid.uuid4().hex}")
    return backup


def create_backup(filepath: Union[str, Path]) -> Path:
    """Copy a file to a backup name that no existing file uses.

    The copy is opened in exclusive-create mode so an existing backup is
    never overwritten, even if one appears after the name was chosen.

    Args:
        filepath: The file to back up

    Returns:
        Path to the backup

    Raises:
        BackupError: If the file could not be copied
    """
    filepath = Path(filepath)

    for _ in range(MAX_BACKUP_ATTEMPTS):
        backup = backup_path_for(filepath)
        try:
            with open(filepath, 'rb') as src:
                with open(backup, 'xb') as dst:
                    try:
                        shutil.copyfileobj(src, dst)
                    except OSError:
                        dst.close()
                        backup.unlink()
                        raise
        except FileExistsError:
            logger.debug(f"Backup name taken, retrying: {backup}")
            continue
        except OSError as e:
            raise BackupError(filepath, f"backup failed: {e}") from e

        try:
            shutil.copystat(filepath, backup)
        except OSError as e:
            logger.warning(f"Could not copy file times to {backup}: {e}")

        logger.debug(f"Backup: {backup}")
        return backup

    raise BackupError(filepath, "no free backup name")


def serialize_document(document: TcxDocument) -> bytes:
    """Serialize a document the way it was read.

    Keeps the original encoding, declaration, standalone flag, line
    endings and final newline.

    Args:
        document: The document to serialize

    Returns:
        Encoded XML bytes
    """
    options = {
        'encoding': document.encoding,
        'xml_declaration': document.xml_declaration,
    }
    if document.standalone is not None:
        options['standalone'] = document.standalone

    data = ET.tostring(document.tree, **options)

    if document.trailing_newline and not data.endswith(b'\n'):
        data += b'\n'
    if document.crlf:
        data = data.replace(b'\n', b'\r\n')

    return data


def save_document(document: TcxDocument, filepath: Optional[Union[str, Path]] = None) -> Path:
    """Write a document over its file.

    Args:
        document: The document to write
        filepath: Target path (default: the path it was loaded from)

    Returns:
        Path to the written file

    Raises:
        WriteError: If serialization or the write fails
    """
    file_path = Path(filepath) if filepath is not None else document.path

    try:
        data = serialize_document(document)
    except (ET.SerialisationError, LookupError, ValueError) as e:
        raise WriteError(file_path, f"could not serialize: {e}") from e

    try:
        with open(file_path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise WriteError(file_path, f"write failed: {e}") from e

    logger.debug(f"Wrote: {file_path}")
    return file_path
