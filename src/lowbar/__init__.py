"""lowbar: small collection and function helpers in the Underscore.js tradition."""

from lowbar.logger.logger import logger
from lowbar.functional import *  # noqa: F401,F403
from lowbar.functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = ["logger", *_functional_all]
