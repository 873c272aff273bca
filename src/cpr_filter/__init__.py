"""CPR Filter — find and replace Danish CPR numbers in free-form text."""

from .redactor import Redactor, redact
from .config import ConfigError, create_redactor, load_config, load_from_yaml
from .patterns import find_candidates
from .validation import birth_date, is_valid_date, is_valid_modulus11
from .types import CprCandidate, CprMatch, FilterConfig, RedactedText

__all__ = [
    "Redactor", "redact",
    "ConfigError", "create_redactor", "load_config", "load_from_yaml",
    "find_candidates",
    "birth_date", "is_valid_date", "is_valid_modulus11",
    "CprCandidate", "CprMatch", "FilterConfig", "RedactedText",
]
__version__ = "0.1.0"
