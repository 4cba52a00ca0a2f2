__version__ = "0.1.0"
__author__ = "chrf-ladder contributors"
__license__ = "Apache-2.0"
__copyright__ = f"Copyright (c) 2026, {__author__}."
__docs__ = "Character n-gram F-score (chrF / chrF3) over multi-order n-gram ladders"
__long_doc__ = """
chrf-ladder computes the chrF family of character n-gram F-scores for a single candidate text against a single
reference text. Every text is counted once into an n-gram ladder, a chain of per-order n-gram counters filled in one
pass with a shared sliding window, and two ladders are compared order by order with an F-beta score that is averaged
over all orders. Arbitrary hashable symbol sequences (token ids, bytes, ...) are supported next to plain text.
"""

__all__ = [
    "__author__",
    "__copyright__",
    "__docs__",
    "__license__",
    "__version__",
]
