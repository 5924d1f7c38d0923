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

"""Glyph tables for the Greek alphabetic (milesian) numerals.

Each table has one row per digit value 1-9 and one column per letter case.
Digit zero has no glyph of its own: it simply contributes nothing to the
rendered numeral.
"""

import enum

# Greek Zero Sign. Has no case variants.
ZERO_SIGN = "\U0001018A"

# Greek numeral sign (keraia) closing a units-level numeral.
KERAIA = "\u0374"

# Greek lower numeral sign marking thousands.
LOWER_NUMERAL_SIGN = "\u0375"

# Capital mu standing for the myriad (10,000).
MYRIAD_SIGN = "Μ"

# Number of decimal places represented by a single glyph group.
DIGITS_PER_MYRIAD = 4


class Case(enum.Enum):
  """Letter case of the rendered numeral."""
  LOWER = "LOWER"
  UPPER = "UPPER"

  @property
  def column(self) -> int:
    """Column index of this case in the glyph tables."""
    return 0 if self is Case.LOWER else 1


class Place(enum.Enum):
  """Place value of a digit within a group of four."""
  ONES = "ONES"
  TENS = "TENS"
  HUNDREDS = "HUNDREDS"
  THOUSANDS = "THOUSANDS"


ONES = (
    ("α", "Α"),
    ("β", "Β"),
    ("γ", "Γ"),
    ("δ", "Δ"),
    ("ε", "Ε"),
    ("ϛ", "Ϛ"),  # Stigma.
    ("ζ", "Ζ"),
    ("η", "Η"),
    ("θ", "Θ"),
)

TENS = (
    ("ι", "Ι"),
    ("κ", "Κ"),
    ("λ", "Λ"),
    ("μ", "Μ"),
    ("ν", "Ν"),
    ("ξ", "Ξ"),
    ("ο", "Ο"),
    ("π", "Π"),
    ("ϙ", "Ϟ"),  # Koppa.
)

HUNDREDS = (
    ("ρ", "Ρ"),
    ("σ", "Σ"),
    ("τ", "Τ"),
    ("υ", "Υ"),
    ("φ", "Φ"),
    ("χ", "Χ"),
    ("ψ", "Ψ"),
    ("ω", "Ω"),
    ("ϡ", "Ϡ"),  # Sampi.
)

THOUSANDS = tuple(
    (LOWER_NUMERAL_SIGN + lower, LOWER_NUMERAL_SIGN + upper)
    for lower, upper in ONES
)

_TABLES = {
    Place.ONES: ONES,
    Place.TENS: TENS,
    Place.HUNDREDS: HUNDREDS,
    Place.THOUSANDS: THOUSANDS,
}

# Place values of the digits in a group, most significant first.
PLACES_IN_MYRIAD = (Place.THOUSANDS, Place.HUNDREDS, Place.TENS, Place.ONES)


def lookup(place: Place, digit: int, case: Case) -> str:
  """Returns the glyph for a non-zero digit.

  Args:
    place: Place value of the digit.
    digit: Digit value between 1 and 9.
    case: Letter case of the glyph.

  Returns:
    Glyph string.

  Raises:
    ValueError if the digit has no glyph.
  """
  if not 1 <= digit <= 9:
    raise ValueError(f"No {place.value.lower()} glyph for digit {digit}")
  return _TABLES[place][digit - 1][case.column]


def myriad_prefix(myriad_power: int) -> str:
  """Returns the marker for `myriad_power` powers of ten thousand.

  The digit in front of the myriad sign is always written in lower case.

  Args:
    myriad_power: Exponent of ten thousand, between 1 and 9.

  Returns:
    Prefix glyph followed by the myriad sign.
  """
  return lookup(Place.ONES, myriad_power, Case.LOWER) + MYRIAD_SIGN
