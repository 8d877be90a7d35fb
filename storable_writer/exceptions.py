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

class StorableError(Exception):
    """General error class"""


class SerializationError(StorableError):
    """Base class for errors raised while encoding a value"""


class StorableWriteError(SerializationError):
    """The underlying sink rejected a write"""


class UnsupportedShapeError(SerializationError):
    """The value is not a reference, a record, a sequence or a scalar"""


class TooLongError(SerializationError):
    """A length or count does not fit in its prefix"""


class ScalarTooLongError(TooLongError):
    """The text of a scalar is longer than 255 bytes"""


class CountTooLargeError(TooLongError):
    """An array, hash or key is longer than 2**32 - 1"""


class MaxBytesExceededError(SerializationError):
    """ This error is raised when the adapted serializer reached its maximum bytes write.

    After this exception is raised the adapted serializer cannot be used anymore. Handlers of this exception are
    expected to bubble up the exception (or an equivalent exception) and should not try to write again on the same
    serializer, whatever was written so far is an incomplete stream.
    """
