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
import pytest

from chrf_ladder.utilities.prints import rank_zero_only


@pytest.fixture
def non_zero_rank():
    """Pretend to run on a process other than rank 0 for the duration of the test."""
    rank = rank_zero_only.rank
    rank_zero_only.rank = 1
    yield
    rank_zero_only.rank = rank
