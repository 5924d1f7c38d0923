# Copyright 2025 The Milesian Authors.
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

"""Splits numbers into groups of decimal digits."""

from milesian.glyphs import numeral_tables as tables_lib

# Digits of a single group: thousand, hundred, ten and one.
Chunk = tuple[int, int, int, int]


def decimal_digits(number: int) -> tuple[int, ...]:
  """Returns the decimal digits of a positive number.

  Args:
    number: Positive integer.

  Returns:
    Digits, most significant first, padded with leading zeros so that the
    length is a multiple of four.
  """
  if number <= 0:
    raise ValueError(f"Expected a positive number, got {number}")

  digits = []
  while number > 0:
    digits.append(number % 10)
    number //= 10

  # Pad so that the digits form whole groups of four.
  while len(digits) % tables_lib.DIGITS_PER_MYRIAD != 0:
    digits.append(0)
  digits.reverse()
  return tuple(digits)


def chunk_digits(digits: tuple[int, ...]) -> list[Chunk]:
  """Groups padded digits into chunks, most significant chunk first."""
  size = tables_lib.DIGITS_PER_MYRIAD
  if not digits or len(digits) % size != 0:
    raise ValueError(
        f"Expected a non-empty multiple of {size} digits, got {len(digits)}"
    )
  chunks = []
  for start in range(0, len(digits), size):
    th, h, t, o = digits[start:start + size]
    chunks.append((th, h, t, o))
  return chunks
