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

r"""
Literal codecs for the text interchange boundary.

Each module here encodes and decodes a single JSON literal of one kind, as `bytes`. None of them deals with the
absence literal `null`, that is left to the nullable types that use them, and none of them performs structural
(object/array) encoding beyond what a literal needs.

>>> loads_json(b'[1, 2]')
[1, 2]
>>> dumps_json({'a': [1, 2], 'b': 'ü'})
b'{"a":[1,2],"b":"\xc3\xbc"}'
>>> is_null_literal(b'null')
True
>>> is_null_literal(b'NULL')
False
>>> is_null_literal(b'NULL', case_sensitive=False)
True
"""

from nullable.encoding.literal import (
    NULL_LITERAL,
    Json,
    dumps_json,
    is_null_literal,
    json_kind,
    loads_json,
    replace_surrogates,
)

__all__ = [
    'Json',
    'NULL_LITERAL',
    'dumps_json',
    'is_null_literal',
    'json_kind',
    'loads_json',
    'replace_surrogates',
]
