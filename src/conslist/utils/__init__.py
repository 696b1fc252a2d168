from conslist.utils.env import getenv_bool
from conslist.utils.logs import setup_logging

__all__ = (
    "getenv_bool",
    "setup_logging",
)
