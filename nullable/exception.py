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

class NullableError(Exception):
    """Base class for exceptions in nullable."""
    pass


class DecodeError(NullableError, ValueError):
    """Raised when bytes received at the text boundary are empty or not a legal literal of the target type.

    A delegating box raises it too when the boxed type's own decoding fails, chaining the original error.
    """
    pass


class DriverScanError(NullableError, TypeError):
    """Raised when a driver value cannot be converted to the target type.
    """
    pass
