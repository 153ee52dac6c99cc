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

from nullable.utils import pydantic


class NullableSettings(pydantic.BaseModel):
    # Whether `Null[T]` accepts any casing of the `null` literal (`NULL`, `Null`, ...) as absence. The concrete types
    # (String, Int64, ...) always match `null` case-sensitively, regardless of this setting.
    NULL_BOX_CASE_INSENSITIVE: bool = True

    # Escape non-ASCII characters as `\uXXXX` when encoding text values.
    TEXT_ENSURE_ASCII: bool = False

    # Default for `dumps_document(omit_absent=...)`, absent members are rendered as `null` when this is false.
    DOCUMENT_OMIT_ABSENT: bool = False
