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

"""Produces Greek alphabetic (milesian) numerals.

Numbers are written with letters standing for the units, tens, hundreds
and thousands. Larger magnitudes are grouped in myriads (powers of 10,000)
where each group is prefixed by a single-digit count of myriads, as in the
converter of R. Cottrell and the overview at
https://mathshistory.st-andrews.ac.uk/HistTopics/Greek_numbers/.

Since the count in front of the myriad sign is a single digit, the largest
number that can be written is 10^40 - 1.

Example:
  >>> to_greek_lowercase(241)
  'σμαʹ'
  >>> to_greek_uppercase(241)
  'ΣΜΑʹ'
"""

from typing import Union

from absl import logging
from milesian.glyphs import digits as digits_lib
from milesian.glyphs import myriads
from milesian.glyphs import numeral_tables as tables_lib

Case = tables_lib.Case

KERAIA = tables_lib.KERAIA
MYRIAD_SIGN = tables_lib.MYRIAD_SIGN
ZERO_SIGN = tables_lib.ZERO_SIGN

# Largest power of ten thousand expressible by a single-digit prefix.
MAX_MYRIAD_POWER = 9

# Largest number that can be written.
MAX_NUMBER = 10_000 ** (MAX_MYRIAD_POWER + 1) - 1


class DomainOverflowError(ValueError):
  """Number is too large to be written with single-digit myriad counts."""


def _overflow_error() -> DomainOverflowError:
  return DomainOverflowError(
      f"Numbers above {MAX_NUMBER} need more than {MAX_MYRIAD_POWER + 1} "
      "myriad groups"
  )


def _to_int(number: Union[int, str]) -> int:
  """Converts and validates the input number."""
  if isinstance(number, bool) or not isinstance(number, (int, str)):
    raise TypeError(
        f"Expected an integer or a string of digits, got {type(number)}"
    )
  if isinstance(number, str):
    digits = number.strip()
    if not digits or not digits.isascii() or not digits.isdigit():
      raise ValueError(f"Not a non-negative decimal number: \"{number}\"")
    # Too many digits to be written, rejected before conversion.
    if len(digits.lstrip("0")) > len(str(MAX_NUMBER)):
      raise _overflow_error()
    number = int(digits)

  if number < 0:
    raise ValueError(f"Negative numbers are not supported: {number}")
  if number > MAX_NUMBER:
    raise _overflow_error()
  return number


def to_greek(number: Union[int, str], case: Case = Case.LOWER) -> str:
  """Converts number to a Greek numeral.

  Args:
    number: Non-negative integer or a string of decimal digits.
    case: Letter case of the numeral. The Zero Sign and the digit counting
      the myriads are the same in both cases.

  Returns:
    String with the Greek numeral representation.

  Raises:
    TypeError if the number is neither an integer nor a string.
    ValueError if the number is negative or not a decimal string.
    DomainOverflowError if the number exceeds `MAX_NUMBER`.
  """
  n = _to_int(number)
  if n == 0:
    return ZERO_SIGN

  chunks = digits_lib.chunk_digits(digits_lib.decimal_digits(n))
  logging.debug("Rendering %d in %d myriad groups: %s", n, len(chunks), chunks)
  return myriads.render_chunks(chunks, case)


def to_greek_lowercase(number: Union[int, str]) -> str:
  """Converts number to a lower-case Greek numeral, e.g. 1 -> `αʹ`."""
  return to_greek(number, Case.LOWER)


def to_greek_uppercase(number: Union[int, str]) -> str:
  """Converts number to an upper-case Greek numeral, e.g. 1 -> `Αʹ`."""
  return to_greek(number, Case.UPPER)
