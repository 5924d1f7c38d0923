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

"""Simple tests for the numeral glyph tables."""

import unicodedata

from absl.testing import absltest
from absl.testing import parameterized
from milesian.glyphs import numeral_tables as lib

Case = lib.Case
Place = lib.Place


class NumeralTablesTest(parameterized.TestCase):

  def test_case_columns(self) -> None:
    self.assertEqual(0, Case.LOWER.column)
    self.assertEqual(1, Case.UPPER.column)

  def test_table_shapes(self) -> None:
    for table in [lib.ONES, lib.TENS, lib.HUNDREDS, lib.THOUSANDS]:
      self.assertLen(table, 9)
      for row in table:
        self.assertLen(row, 2)

  def test_marks(self) -> None:
    self.assertEqual("GREEK NUMERAL SIGN", unicodedata.name(lib.KERAIA))
    self.assertEqual(
        "GREEK LOWER NUMERAL SIGN", unicodedata.name(lib.LOWER_NUMERAL_SIGN)
    )
    self.assertEqual(
        "GREEK CAPITAL LETTER MU", unicodedata.name(lib.MYRIAD_SIGN)
    )
    self.assertEqual("GREEK ZERO SIGN", unicodedata.name(lib.ZERO_SIGN))

  @parameterized.named_parameters(
      dict(testcase_name="ones", place=Place.ONES, lower="ε", upper="Ε"),
      dict(testcase_name="tens", place=Place.TENS, lower="ν", upper="Ν"),
      dict(testcase_name="hundreds", place=Place.HUNDREDS,
           lower="φ", upper="Φ"),
      dict(testcase_name="thousands", place=Place.THOUSANDS,
           lower="͵ε", upper="͵Ε"),
  )
  def test_lookup(self, place: Place, lower: str, upper: str) -> None:
    self.assertEqual(lower, lib.lookup(place, 5, Case.LOWER))
    self.assertEqual(upper, lib.lookup(place, 5, Case.UPPER))

  def test_archaic_letters(self) -> None:
    self.assertEqual("ϛ", lib.lookup(Place.ONES, 6, Case.LOWER))
    self.assertEqual("Ϛ", lib.lookup(Place.ONES, 6, Case.UPPER))
    self.assertEqual("ϙ", lib.lookup(Place.TENS, 9, Case.LOWER))
    self.assertEqual("Ϟ", lib.lookup(Place.TENS, 9, Case.UPPER))
    self.assertEqual("ϡ", lib.lookup(Place.HUNDREDS, 9, Case.LOWER))
    self.assertEqual("Ϡ", lib.lookup(Place.HUNDREDS, 9, Case.UPPER))

  def test_thousands_carry_numeral_sign(self) -> None:
    for digit in range(1, 10):
      for case in Case:
        glyph = lib.lookup(Place.THOUSANDS, digit, case)
        self.assertTrue(glyph.startswith(lib.LOWER_NUMERAL_SIGN))
        self.assertEqual(lib.lookup(Place.ONES, digit, case), glyph[1:])

  def test_thousands_code_points(self) -> None:
    self.assertEqual("\u0375\u03b1", lib.lookup(Place.THOUSANDS, 1, Case.LOWER))
    self.assertEqual("\u0375\u0398", lib.lookup(Place.THOUSANDS, 9, Case.UPPER))

  def test_undecorated_places(self) -> None:
    for place in [Place.ONES, Place.TENS, Place.HUNDREDS]:
      for digit in range(1, 10):
        for case in Case:
          self.assertLen(lib.lookup(place, digit, case), 1)

  @parameterized.parameters(0, 10, -1)
  def test_lookup_invalid_digit(self, digit: int) -> None:
    with self.assertRaises(ValueError):
      lib.lookup(Place.ONES, digit, Case.LOWER)

  def test_myriad_prefix(self) -> None:
    self.assertEqual("αΜ", lib.myriad_prefix(1))
    self.assertEqual("βΜ", lib.myriad_prefix(2))
    self.assertEqual("θΜ", lib.myriad_prefix(9))
    with self.assertRaises(ValueError):
      lib.myriad_prefix(10)


if __name__ == "__main__":
  absltest.main()
