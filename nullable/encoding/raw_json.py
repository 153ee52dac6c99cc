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
This module implements passing a pre-encoded JSON document through unchanged.

Decoding only checks that the bytes are well-formed JSON and keeps them verbatim, whitespace included. Encoding
emits the stored bytes verbatim, empty bytes are taken as absence:

>>> decode_raw_json(b'[1, 2, 3]')
b'[1, 2, 3]'
>>> encode_raw_json(b'[1, 2, 3]')
b'[1, 2, 3]'
>>> encode_raw_json(b'')
b'null'
>>> try:
...     decode_raw_json(b'[1, 2')
... except ValueError as e:
...     print(type(e).__name__)
DecodeError
"""

from nullable.encoding.literal import NULL_LITERAL, loads_json


def encode_raw_json(value: bytes) -> bytes:
    """ Emits the stored document, or `null` when there is none.
    """
    if not value:
        return NULL_LITERAL
    return bytes(value)


def decode_raw_json(data: bytes) -> bytes:
    """ Validates a JSON document and returns a copy of its bytes.
    """
    loads_json(data)
    return bytes(data)
