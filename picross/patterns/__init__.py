"""Line pattern generators and the dialect registry."""

from __future__ import annotations

from typing import Callable, Dict, List

from picross.core.model import Clue, Dialect, Pattern

Generator = Callable[[int, Clue], List[Pattern]]

GENERATOR_REGISTRY: Dict[Dialect, Generator] = {}


def register_generator(dialect: Dialect) -> Callable[[Generator], Generator]:
    def decorator(fn: Generator) -> Generator:
        GENERATOR_REGISTRY[dialect] = fn
        return fn
    return decorator


def generate_line_patterns(dialect: Dialect, length: int, clue: Clue) -> List[Pattern]:
    """Every pattern of one line that agrees with ``clue``, in generation order.

    For :attr:`Dialect.MEGA` the returned patterns span the two paired lines
    and have ``2 * length`` cells.
    """
    return GENERATOR_REGISTRY[Dialect(dialect)](length, clue)


from . import binary, color, mega  # noqa: E402,F401  populate the registry
