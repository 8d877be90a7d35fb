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

import pytest

from storable_writer import CountTooLargeError, Ref, StorableSettings, marshal
from storable_writer.compound_encoding.array import encode_array
from storable_writer.encoding.scalar import encode_str
from storable_writer.serialization import Serializer

SETTINGS = StorableSettings()


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (['hey', 'there'], '050702000000020a036865790a057468657265'),
        (('hey', 'there'), '050702000000020a036865790a057468657265'),
        ([], '05070200000000'),
        (b'\x01\x02', '050702000000020a01310a0132'),
        (bytearray(b'\x0a'), '050702000000010a023130'),
        ([[1], []], '050702000000020200000001' + '0a0131' + '0200000000'),
        ([Ref('a'), True], '05070200000002' + '040a0161' + '0a0131'),
    ]
)
def test_array_bytes(value, expected):
    assert marshal(value, settings=SETTINGS).hex() == expected


@pytest.mark.parametrize('count', [0, 1, 3, 300, 70000])
def test_array_count_matches_elements(count):
    data = marshal(['a'] * count, settings=SETTINGS)
    assert data[2] == 0x02
    assert int.from_bytes(data[3:7], byteorder='big') == count
    assert len(data) == 7 + 3 * count


class _HugeCollection:
    def __len__(self) -> int:
        return 2**32

    def __iter__(self):
        raise AssertionError('elements must not be reached')

    def __contains__(self, item) -> bool:
        return False


def test_array_count_too_large():
    se = Serializer.build_bytes_serializer()
    with pytest.raises(CountTooLargeError):
        encode_array(se, _HugeCollection(), encode_str)
    assert se.cur_pos() == 0
