# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
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

"""Request token generation.

Web translation endpoints expect a ``tk`` parameter derived from the query
text and a seed pair ``(b, d1)`` normally scraped from the service page.
Scraping breaks whenever the page changes, so lingoswitch uses a fixed
seed pair from settings instead.

The arithmetic follows JavaScript semantics: bitwise operators work on
signed 32-bit integers and ``>>>`` is an unsigned shift.
"""

from __future__ import annotations

from dataclasses import dataclass

_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000

# Shift/add programs applied per byte and once at the end
_BYTE_OPS = "+-a^+6"
_FINAL_OPS = "+-3^+b+-f"


@dataclass(frozen=True)
class TokenSeed:
    """Seed pair used to compute request tokens.

    Attributes:
        b: Base value, also mixed into the second token part
        d1: Value XORed into the final hash
    """

    b: int = 427110
    d1: int = 1469889687


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - 0x100000000 if value & _SIGN_32 else value


def _apply_ops(a: int, ops: str) -> int:
    for i in range(0, len(ops) - 2, 3):
        op_char = ops[i + 2]
        shift = ord(op_char) - 87 if op_char >= "a" else int(op_char)
        if ops[i + 1] == "+":
            d = (a & _MASK_32) >> shift
        else:
            d = _to_int32(a << shift)
        a = _to_int32(a + d) if ops[i] == "+" else _to_int32(a ^ d)
    return a


def generate_token(text: str, seed: TokenSeed | None = None) -> str:
    """Compute the request token for text.

    Args:
        text: Query text
        seed: Seed pair (defaults to TokenSeed())

    Returns:
        Token formatted as ``"<a>.<a ^ b>"``

    Example:
        >>> token = generate_token("hello")
        >>> first, second = token.split(".")
        >>> int(first) ^ 427110 == int(second)
        True
    """
    seed = seed or TokenSeed()

    a = seed.b
    for byte in text.encode("utf-8"):
        a = _apply_ops(a + byte, _BYTE_OPS)
    a = _apply_ops(a, _FINAL_OPS)
    a = _to_int32(a ^ seed.d1)
    if a < 0:
        a = (a & 0x7FFFFFFF) + 0x80000000
    a %= 1_000_000

    return f"{a}.{a ^ seed.b}"
