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
This module was made to hold simple encoding implementations.

Simple in this context means "not compound": the encoders here write a fixed piece of the format (the header, a
fixed-size integer, a scalar) and never call back into the value dispatch. For compound values (arrays, hashes,
references) the encoder should be in the `compound_encoding` module.

The general organization should be that each submodule `x` deals with a single kind of value and look like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

The "config params" are optional and specific to each encoder. Submodules should not have to take into consideration
how values are mapped to encoders, that is the job of `storable_writer.encoder`.
"""
