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
import math
from typing import Any


def _check_max_order(max_order: Any) -> None:
    """Check that ``max_order`` is a valid n-gram order, else raise error.

    An order of 0 is reserved for the terminal end of a ladder and can never be requested explicitly.

    """
    if isinstance(max_order, bool) or not isinstance(max_order, int) or max_order < 1:
        raise ValueError(
            f"Expected argument `max_order` to be an integer greater than or equal to 1, but got {max_order}."
        )


def _check_beta(beta: float) -> None:
    """Check that ``beta`` is a finite non-negative number, else raise error."""
    if isinstance(beta, bool) or not isinstance(beta, (int, float)) or not math.isfinite(beta) or beta < 0:
        raise ValueError(f"Expected argument `beta` to be a finite number greater than or equal to 0, but got {beta}.")


def _check_same_max_order(candidate: Any, reference: Any) -> None:
    """Check that both ladders were built with the same maximum order, else raise error."""
    if candidate.max_order != reference.max_order:
        raise ValueError(
            "Expected argument `candidate` and `reference` to have the same `max_order`,"
            f" but got {candidate.max_order} and {reference.max_order}."
        )
