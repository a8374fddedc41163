# johnsons_gambit/__init__.py
"""
Johnson's Gambit — 3 Hand Monty round resolution with session stats,
and the Security Gate SG1 form checks.
"""

__version__ = "1.0.0"

from .errors import ConfigError, GambitError, GateValidationError, InputError, RoundInputError
from .forms import RoundRequest, parse_round_form
from .hands import Hand, hand_name, parse_hand
from .resolver import WIN_MULTIPLIER, Outcome, resolve_round
from .rng import ChoiceSource, RandomChoiceSource, ScriptedChoiceSource
from .security_gate import SECRET_MESSAGE, Clearance, check_clearance, is_five_digit_zip
from .stats import SessionStats, win_rate

__all__ = [
    # Monty
    "Hand",
    "hand_name",
    "parse_hand",
    "Outcome",
    "resolve_round",
    "WIN_MULTIPLIER",
    "SessionStats",
    "win_rate",
    "ChoiceSource",
    "RandomChoiceSource",
    "ScriptedChoiceSource",
    "RoundRequest",
    "parse_round_form",
    # SG1
    "Clearance",
    "check_clearance",
    "is_five_digit_zip",
    "SECRET_MESSAGE",
    # Errors
    "GambitError",
    "InputError",
    "RoundInputError",
    "GateValidationError",
    "ConfigError",
    # Package version
    "__version__",
]
