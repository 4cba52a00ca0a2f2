r"""Root package info."""

import logging as __logging

from chrf_ladder.__about__ import *  # noqa: F403

_logger = __logging.getLogger("chrf_ladder")
_logger.addHandler(__logging.StreamHandler())
_logger.setLevel(__logging.INFO)

from chrf_ladder import functional  # noqa: E402
from chrf_ladder.functional import chrf, chrf3  # noqa: E402
from chrf_ladder.ladder import NgramLadder, new_ladder  # noqa: E402

__all__ = [
    "NgramLadder",
    "chrf",
    "chrf3",
    "functional",
    "new_ladder",
]
