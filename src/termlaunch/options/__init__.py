"""Command-line options

- table: option names, arities and actions
- tokens: prescan for the command switch, argv tokenizer
- parser: drives a PlanBuilder from the tokens
"""

from .parser import OptionParser, parse_options
from .table import LONG_OPTIONS, OPTIONS, SHORT_OPTIONS, Arity, OptionAction, OptionSpec
from .tokens import OptionEvent, PrescanResult, prescan, tokenize

__all__ = [
    # Table
    "Arity",
    "OptionAction",
    "OptionSpec",
    "OPTIONS",
    "LONG_OPTIONS",
    "SHORT_OPTIONS",
    # Tokens
    "OptionEvent",
    "PrescanResult",
    "prescan",
    "tokenize",
    # Parser
    "OptionParser",
    "parse_options",
]
