"""Build the run configuration from arguments and interactive prompts."""

import argparse
import logging
import math
from pathlib import Path
from typing import Callable, Optional

from .config import CONFIRM_PROMPT, SCALE_PROMPT
from .errors import ConfigurationError
from .models import ScaleConfig

logger = logging.getLogger(__name__)


def parse_scale_factor(text: Optional[str]) -> Optional[float]:
    """Parse a scale factor.

    Args:
        text: User or command-line input, e.g. "0.95"

    Returns:
        The factor, or None if it is not a finite, non-zero number
    """
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value == 0:
        return None
    return value


def scale_factor_type(text: str) -> float:
    """argparse type for --scale."""
    value = parse_scale_factor(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid scale factor: {text!r}")
    return value


def confirm_scale_factor(
    factor: float,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print
) -> Optional[bool]:
    """Ask until the user answers Y or N.

    Returns:
        True for Y, False for N, None if input ended
    """
    while True:
        output_func(CONFIRM_PROMPT.format(percent=factor * 100))
        try:
            answer = input_func('').strip().upper()
        except EOFError:
            return None
        if answer in ('Y', 'N'):
            return answer == 'Y'


def prompt_scale_factor(
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print
) -> Optional[float]:
    """Ask for a scale factor and have the user confirm it.

    Blank input cancels. A rejected factor asks again.

    Args:
        input_func: Reads one line of input
        output_func: Shows a prompt

    Returns:
        The confirmed factor, or None if the user cancelled
    """
    while True:
        output_func(SCALE_PROMPT)
        try:
            text = input_func('')
        except EOFError:
            return None

        if not text.strip():
            return None

        factor = parse_scale_factor(text)
        if factor is None:
            output_func(f"Not a usable scale factor: {text.strip()}")
            continue

        confirmed = confirm_scale_factor(factor, input_func, output_func)
        if confirmed is None:
            return None
        if confirmed:
            return factor


def resolve_config(
    args: argparse.Namespace,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print
) -> ScaleConfig:
    """Turn parsed arguments into a ScaleConfig, prompting for what is missing.

    Args:
        args: Parsed command-line arguments
        input_func: Reads one line of input
        output_func: Shows a prompt

    Returns:
        The configuration for the run

    Raises:
        ConfigurationError: If no scale factor was given or confirmed
    """
    folder = getattr(args, 'folder', None)
    if folder is None or not str(folder).strip():
        working_folder = Path.cwd()
        logger.debug(f"No folder given, using {working_folder}")
    else:
        working_folder = Path(str(folder).strip())

    scale_factor = getattr(args, 'scale', None)
    if scale_factor is None:
        if getattr(args, 'no_input', False):
            raise ConfigurationError("No scale factor given (use --scale)")
        scale_factor = prompt_scale_factor(input_func, output_func)
        if scale_factor is None:
            raise ConfigurationError("No scale factor entered")

    return ScaleConfig(
        scale_factor=scale_factor,
        working_folder=working_folder,
        dry_run=getattr(args, 'dry_run', False)
    )
