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

r"""Prints Greek numerals for a list of numbers.

Example:
--------
python -m milesian.glyphs.numbers_to_greek_main \
  --numbers 1,241,97554,2056839184 \
  --case UPPER \
  --logtostderr
"""

from collections.abc import Sequence

from absl import app
from absl import flags
from absl import logging
from milesian.glyphs import numbers_to_greek as greek_lib

Case = greek_lib.Case

_NUMBERS = flags.DEFINE_list(
    "numbers", None,
    "List of non-negative numbers, e.g., `1,241,97554`."
)

_CASE = flags.DEFINE_enum_class(
    "case",
    default=Case.LOWER,
    enum_class=Case,
    help="Letter case of the numerals."
)

_BOTH_CASES = flags.DEFINE_bool(
    "both_cases", False,
    "Print both the lower- and upper-case numerals. Overrides `--case`."
)

_SKIP_INVALID = flags.DEFINE_bool(
    "skip_invalid", False,
    "Skip numbers that cannot be converted instead of failing."
)


def format_line(number: str, case: Case, both_cases: bool = False) -> str:
  """Formats a single tab-separated output line for the number."""
  if both_cases:
    numerals = [
        greek_lib.to_greek_lowercase(number),
        greek_lib.to_greek_uppercase(number),
    ]
  else:
    numerals = [greek_lib.to_greek(number, case)]
  return "\t".join([number.strip(), *numerals])


def main(argv: Sequence[str]) -> None:
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")
  if not _NUMBERS.value:
    raise app.UsageError("Specify --numbers to convert.")

  logging.info("Converting %d numbers ...", len(_NUMBERS.value))
  num_skipped = 0
  for number in _NUMBERS.value:
    try:
      line = format_line(number, _CASE.value, both_cases=_BOTH_CASES.value)
    except ValueError as e:
      if not _SKIP_INVALID.value:
        raise
      logging.warning("Skipping \"%s\": %s", number, e)
      num_skipped += 1
      continue
    print(line)

  if num_skipped:
    logging.info("Skipped %d invalid numbers.", num_skipped)


def run() -> None:
  app.run(main)


if __name__ == "__main__":
  run()
