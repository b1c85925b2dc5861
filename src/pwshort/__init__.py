"""pwshort - shorten PowerShell commands and parameters to their aliases."""

from loguru import logger

from .core.engine import Shortener, shorten
from .core.types import ShortenResult
from .errors import ParseFailure, PwshortError
from .registry import CommandRegistry

__version__ = "0.1.0"

# silent when used as a library; configure_logging turns it back on
logger.disable("pwshort")

__all__ = ["CommandRegistry", "ParseFailure", "PwshortError", "ShortenResult", "Shortener", "shorten"]
