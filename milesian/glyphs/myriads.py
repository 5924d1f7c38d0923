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

"""Renders groups of four digits as myriad-grouped Greek numerals.

A group standing for a multiple of 10,000^k is introduced by the
lower-case glyph for k followed by the myriad sign, e.g. `βΜ` for
10,000^2. Groups made entirely of zeros are omitted. Non-empty groups are
separated by a comma.
"""

from milesian.glyphs import digits as digits_lib
from milesian.glyphs import numeral_tables as tables_lib

Case = tables_lib.Case

CHUNK_SEPARATOR = ", "


def render_chunk(chunk: digits_lib.Chunk, case: Case) -> str:
  """Renders the digits of a single group without the myriad prefix.

  Args:
    chunk: Thousand, hundred, ten and one digits. At least one is non-zero.
    case: Letter case of the glyphs.

  Returns:
    Glyphs of the non-zero digits. Groups without a thousands digit are
    closed by the keraia.
  """
  glyphs = []
  for place, digit in zip(tables_lib.PLACES_IN_MYRIAD, chunk):
    if digit != 0:
      glyphs.append(tables_lib.lookup(place, digit, case))

  # The thousands sign already marks the numeral.
  if chunk[0] == 0:
    glyphs.append(tables_lib.KERAIA)
  return "".join(glyphs)


def render_chunks(chunks: list[digits_lib.Chunk], case: Case) -> str:
  """Renders all the groups of a number.

  The myriad power starts at the number of groups minus one and is only
  lowered after a group is actually rendered, so empty groups do not
  consume a power of their own.

  Args:
    chunks: Groups of four digits, most significant first.
    case: Letter case of the digit glyphs.

  Returns:
    Rendered numeral.
  """
  myriad_power = len(chunks) - 1
  parts = []
  for chunk in chunks:
    if not any(chunk):
      continue

    part = ""
    if myriad_power > 0:
      part = tables_lib.myriad_prefix(myriad_power)
    parts.append(part + render_chunk(chunk, case))
    myriad_power = max(myriad_power - 1, 0)
  return CHUNK_SEPARATOR.join(parts)
