"""Power scaling logic."""

import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Union

from .config import NAMESPACES, POWER_XPATH
from .errors import FileOperationError
from .loader import find_tcx_files, load_document
from .models import FileResult, ScaleConfig, ScaleSummary, TcxDocument
from .reporter import format_file_summary
from .writer import create_backup, save_document

logger = logging.getLogger(__name__)

DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_power(text: Optional[str]) -> Optional[float]:
    """Parse the text of a Watts element.

    Returns:
        The value, or None for missing, non-decimal or non-finite text
    """
    if text is None:
        return None
    text = text.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def scale_power(raw: float, factor: float) -> Optional[int]:
    """Scale a power reading and snap it to whole watts.

    Uses round-half-to-even, so 0.5 steps go to the nearest even value.
    Returns None when the product is too large to represent.
    """
    scaled = raw * factor
    if not math.isfinite(scaled):
        return None
    return round(scaled)


def find_power_elements(document: TcxDocument) -> list:
    """Find every Watts element in the document, at any depth."""
    return document.tree.xpath(POWER_XPATH, namespaces=NAMESPACES)


def describe_element(elem) -> str:
    """Short name and position of an element for log messages."""
    name = elem.tag.rpartition('}')[2]
    if elem.prefix:
        name = f"{elem.prefix}:{name}"
    if elem.sourceline:
        return f"<{name}> at line {elem.sourceline}"
    return f"<{name}>"


def scale_document(document: TcxDocument, factor: float) -> ScaleSummary:
    """Scale every Watts value in a document in place.

    Values that are not numbers are reported and left as they are.

    Args:
        document: The parsed document, modified in place
        factor: Multiplier applied to each reading

    Returns:
        ScaleSummary of the scaled points
    """
    summary = ScaleSummary()

    for elem in find_power_elements(document):
        raw = parse_power(elem.text)
        if raw is None:
            summary.invalid_count += 1
            logger.warning(
                f"Invalid power value {elem.text!r} in {describe_element(elem)} "
                f"of {document.path.name}, left unchanged"
            )
            continue

        new_power = scale_power(raw, factor)
        if new_power is None:
            summary.invalid_count += 1
            logger.warning(
                f"Power value {elem.text!r} in {describe_element(elem)} "
                f"of {document.path.name} overflows when scaled, left unchanged"
            )
            continue

        elem.text = str(new_power)
        summary.add_point(new_power)
        logger.debug(f"{raw} -> {new_power}")

    return summary


def scale_file(filepath: Union[str, Path], config: ScaleConfig) -> FileResult:
    """Scale one file, keeping a backup of the original.

    The backup is written before the original is overwritten. A failure
    at any step is logged and returned as a failed result.

    Args:
        filepath: The .tcx file to scale
        config: Settings for the run

    Returns:
        FileResult describing what happened
    """
    filepath = Path(filepath)
    logger.info(f"Processing {filepath}")

    document = load_document(filepath)
    if document is None:
        return FileResult(path=filepath, status='failed', error='could not load file')

    summary = scale_document(document, config.scale_factor)

    if config.dry_run:
        logger.info(f"  {format_file_summary(summary)} (dry run, not written)")
        return FileResult(path=filepath, status='dry_run', summary=summary)

    try:
        backup_path = create_backup(filepath)
    except FileOperationError as e:
        logger.error(f"Skipping {filepath}: {e}")
        return FileResult(path=filepath, status='failed', summary=summary, error=str(e))

    try:
        save_document(document)
    except FileOperationError as e:
        logger.error(f"Original kept at {backup_path}: {e}")
        return FileResult(
            path=filepath,
            status='failed',
            summary=summary,
            backup_path=backup_path,
            error=str(e)
        )

    logger.info(f"  {format_file_summary(summary)}")
    return FileResult(path=filepath, status='scaled', summary=summary, backup_path=backup_path)


def process_folder(config: ScaleConfig) -> List[FileResult]:
    """Scale every .tcx file in the configured folder, one at a time.

    Args:
        config: Settings for the run

    Returns:
        One FileResult per candidate file, in processing order
    """
    return [scale_file(filepath, config) for filepath in find_tcx_files(config.working_folder)]
