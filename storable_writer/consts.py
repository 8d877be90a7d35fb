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

"""
Constants of the Storable binary format as written by this library.

Only the subset of tags that the encoder emits is defined here, plus `SX_UTF8STR` which is part of the tag space but
never written (every piece of text goes out as a plain `SX_SCALAR`).
"""

# Header: `MAGIC` is the "network order" flag combined with the major version, `VERSION` is the minor version.
MAGIC: int = 0x05
VERSION: int = 0x07

SX_ARRAY: int = 0x02    # ( 2): Array forthcoming (size, item list)
SX_HASH: int = 0x03     # ( 3): Hash forthcoming (size, value/key pair list)
SX_REF: int = 0x04      # ( 4): Reference to object forthcoming
SX_SCALAR: int = 0x0a   # (10): Scalar (binary, small) follows (length, data)
SX_UTF8STR: int = 0x17  # (23): UTF-8 string forthcoming (small), reserved

# Capacity of the length prefix of a scalar (1 byte).
MAX_SCALAR_LENGTH: int = 0xff

# Capacity of the count prefix of arrays and hashes and of the key length of hash entries (4 bytes).
MAX_COUNT: int = 0xffff_ffff
