# Copyright The Lightning team.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from typing import Union

import torch
from torch import Tensor

from chrf_ladder.ladder import NgramLadder
from chrf_ladder.utilities.checks import _check_beta, _check_same_max_order
from chrf_ladder.utilities.prints import rank_zero_debug, rank_zero_warn

_EPS_SMOOTHING = 1e-16
_CHRF3_BETA = 3.0
_CHRF3_MAX_ORDER = 6


def _chrf_ladder_update(candidate: NgramLadder, reference: NgramLadder) -> tuple[Tensor, Tensor, Tensor]:
    """Collect per-order statistics of two ladders.

    Args:
        candidate: ladder of the evaluated text
        reference: ladder of the reference text

    Return:
        matching:
            Clipped number of candidate n-grams found in the reference, per order.
        total_candidate:
            Number of candidate n-grams, per order.
        total_reference:
            Number of reference n-grams, per order.

        All three are ``float64`` tensors of shape ``(max_order,)`` with the highest order first.

    Raises:
        ValueError:
            If ``candidate`` and ``reference`` have a different ``max_order``.

    """
    _check_same_max_order(candidate, reference)

    matching: list[int] = []
    total_candidate: list[int] = []
    total_reference: list[int] = []
    for candidate_counter, reference_counter in zip(candidate.counters(), reference.counters()):
        n_matching = 0
        n_reference = 0
        for ngram, count_reference in reference_counter.ngrams.items():
            n_reference += count_reference
            count_candidate = candidate_counter.ngrams.get(ngram)
            if count_candidate is not None:
                n_matching += min(count_reference, count_candidate)
        matching.append(n_matching)
        total_candidate.append(candidate_counter.total())
        total_reference.append(n_reference)

    return (
        torch.tensor(matching, dtype=torch.float64),
        torch.tensor(total_candidate, dtype=torch.float64),
        torch.tensor(total_reference, dtype=torch.float64),
    )


def _chrf_ladder_compute(
    matching: Tensor, total_candidate: Tensor, total_reference: Tensor, beta: float
) -> tuple[Tensor, Tensor]:
    """Compute the F-beta score of every order and their sum.

    Precision and recall of an order without any candidate or reference n-gram are replaced by ``1e-16`` so the score
    is always finite.

    Args:
        matching: clipped number of matching n-grams per order
        total_candidate: number of candidate n-grams per order
        total_reference: number of reference n-grams per order
        beta: importance of recall w.r.t. precision

    Return:
        Per-order F-beta scores (same order as the inputs) and their sum.

    """
    eps = torch.tensor(_EPS_SMOOTHING, dtype=torch.float64)
    precision = torch.where(total_candidate > 0, matching / total_candidate.clamp(min=1.0), eps)
    recall = torch.where(total_reference > 0, matching / total_reference.clamp(min=1.0), eps)

    beta2 = beta**2
    numerator = (1 + beta2) * (precision * recall)
    denominator = torch.max(beta2 * precision + recall, eps)
    f_score = numerator / denominator
    return f_score, f_score.sum()


def _chrf_ladder_score(beta: float, candidate: NgramLadder, reference: NgramLadder) -> tuple[float, int]:
    """Return the sum of the per-order F-beta scores and the number of orders that were scored."""
    f_score, f_score_sum = _chrf_ladder_compute(*_chrf_ladder_update(candidate, reference), beta)
    return f_score_sum.item(), f_score.numel()


def _check_ladder(ladder: NgramLadder, name: str) -> None:
    if not isinstance(ladder, NgramLadder):
        raise ValueError(f"Expected argument `{name}` to be an `NgramLadder`, but got {type(ladder).__name__}.")


def chrf(
    beta: float,
    candidate: NgramLadder,
    reference: NgramLadder,
    return_order_scores: bool = False,
) -> Union[float, tuple[float, Tensor]]:
    """Calculate a chrF score with a custom ``beta`` between two n-gram ladders.

    For every n-gram order the clipped number of matching n-grams gives a precision (w.r.t. the candidate) and a
    recall (w.r.t. the reference), combined into an F-beta score. The final score is the mean over all orders of the
    ladders.

    .. note::
        Unlike :func:`chrf3` the returned score is *not* multiplied by 100.

    Args:
        beta: A parameter determining an importance of recall w.r.t. precision. If ``beta=1``, their importance is
            equal.
        candidate: ladder built from the evaluated text
        reference: ladder built from the reference text, with the same ``max_order`` as ``candidate``
        return_order_scores: An indication whether the F-beta score of every order is returned as well.

    Return:
        The chrF score, conventionally in ``[0, 1]``.
        (Optionally) A ``float64`` tensor with the F-beta score of every order, order 1 first.

    Raises:
        ValueError:
            If ``beta`` is negative or not finite.
        ValueError:
            If ``candidate`` or ``reference`` is not an :class:`~chrf_ladder.NgramLadder`.
        ValueError:
            If ``candidate`` and ``reference`` have a different ``max_order``.

    Example:
        >>> from chrf_ladder import NgramLadder, chrf
        >>> candidate = NgramLadder.from_text("aoeu33", max_order=2)
        >>> reference = NgramLadder.from_text("axeu33", max_order=2)
        >>> round(chrf(1.0, candidate, reference), 4)
        0.7167

    """
    _check_beta(beta)
    _check_ladder(candidate, "candidate")
    _check_ladder(reference, "reference")

    matching, total_candidate, total_reference = _chrf_ladder_update(candidate, reference)
    if not total_candidate.any() or not total_reference.any():
        rank_zero_warn(
            "The `candidate` or `reference` ladder does not contain any n-gram."
            " The chrF score falls back to its smoothing value and is close to 0.",
            UserWarning,
        )

    f_score, f_score_sum = _chrf_ladder_compute(matching, total_candidate, total_reference, beta)
    score = f_score_sum.item() / f_score.numel()
    rank_zero_debug(f"chrF (beta={beta}) per-order scores from order {candidate.max_order} down: {f_score.tolist()}")

    if return_order_scores:
        return score, f_score.flip(0)
    return score


def _as_chrf3_ladder(value: Union[str, NgramLadder], name: str) -> NgramLadder:
    if isinstance(value, str):
        return NgramLadder.from_text(value, max_order=_CHRF3_MAX_ORDER)
    _check_ladder(value, name)
    if value.max_order != _CHRF3_MAX_ORDER:
        raise ValueError(
            f"Expected argument `{name}` to have `max_order={_CHRF3_MAX_ORDER}`, but got {value.max_order}."
        )
    return value


def chrf3(candidate: Union[str, NgramLadder], reference: Union[str, NgramLadder]) -> float:
    """Calculate the chrF3 score: character 6-grams, ``beta=3``, on a ``[0, 100]`` scale.

    Args:
        candidate: evaluated text or its ladder of ``max_order=6``
        reference: reference text or its ladder of ``max_order=6``

    Return:
        The chrF3 score.

    Raises:
        ValueError:
            If a ladder with a ``max_order`` other than 6 is given.

    Example:
        >>> from chrf_ladder import chrf3
        >>> round(chrf3("aoeu33", "axeu33"), 4)
        37.7778

    """
    candidate = _as_chrf3_ladder(candidate, "candidate")
    reference = _as_chrf3_ladder(reference, "reference")
    return chrf(_CHRF3_BETA, candidate, reference) * 100.0
