"""String assembly: combines all operation mixins into the final Str class."""

from .base import StrBase
from .derivers import DeriversMixin
from .formatting import FormattingMixin
from .mutators import MutatorsMixin
from .queries import QueriesMixin
from .transformers import TransformersMixin


class Str(
    QueriesMixin,
    DeriversMixin,
    FormattingMixin,
    TransformersMixin,
    MutatorsMixin,
    StrBase,
):
    """Owned, growable, NUL-terminated byte string."""
    pass


__all__ = ["Str"]
