# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(base: dict[K, Any], override: dict[K, Any]) -> dict[K, Any]:
    """
    Return a new dict with `override` merged over `base`, nested dicts are merged key by key and anything else in
    `override` replaces what is in `base`. Both arguments are left untouched.

    >>> base = dict(MAX_OUTPUT_BYTES=10, nested=dict(a=1, b=2))
    >>> override = dict(nested=dict(b=3), UNSUPPORTED_SHAPE='skip')
    >>> deep_merge(base, override) == dict(MAX_OUTPUT_BYTES=10, nested=dict(a=1, b=3), UNSUPPORTED_SHAPE='skip')
    True
    >>> base == dict(MAX_OUTPUT_BYTES=10, nested=dict(a=1, b=2))
    True
    """
    merged = deepcopy(base)

    def merge_into(target: dict[K, Any], source: dict[K, Any]) -> None:
        for key, value in source.items():
            current = target.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merge_into(current, value)
            else:
                target[key] = deepcopy(value)

    merge_into(merged, override)
    return merged
