# reading .ninja_log files written by ninja
#
# each line after the header is one finished command:
#   <begin ms>\t<end ms>\t<restat mtime>\t<output name>\t<command hash>
# begin and end are relative to when that ninja invocation started

import re
from typing import TextIO

NINJA_LOG_HEADER = "# ninja log v5"

# ascii digits only
OFFSET_PATTERN = re.compile(r"[+-]?[0-9]+")

class NinjaLogError(Exception):
  pass

# represents a single finished command from the log
class NinjaLogEntry:
  def __init__(self, name: str, begin: int, end: int):
    self.name = name
    self.begin = begin
    self.end = end

  def __eq__(self, other):
    return isinstance(other, NinjaLogEntry) and (self.name, self.begin, self.end) == (other.name, other.begin, other.end)

  def __str__(self):
    return f"({self.name} [{self.begin}:{self.end}])"
  def __repr__(self):
    return str(self)

def parse_entry(line: str) -> NinjaLogEntry:
  fields = line.split("\t")
  if len(fields) < 4:
    raise NinjaLogError(f"Unable to parse ninja entry {line!r}: expected at least 4 fields, got {len(fields)}")

  begin, end, _, name = fields[:4]
  for field in [begin, end]:
    if OFFSET_PATTERN.fullmatch(field) is None:
      raise NinjaLogError(f"Unable to parse ninja entry {line!r}: invalid offset {field!r}")

  return NinjaLogEntry(name, int(begin), int(end))

def read_ninja_log(f: TextIO) -> list[NinjaLogEntry]:
  """Reads all entries from an open ninja log, sorted by begin time.

  If an entry ends before the one preceding it in the file, ninja restarted
  and appended to the log of a previous build. Everything before that entry
  is dropped, only the last build is kept.

  Raises NinjaLogError if the header or any entry can't be parsed. Nothing is
  returned for a partially valid log.
  """
  entries: list[NinjaLogEntry] = []
  prev_end = 0
  try:
    header = f.readline().rstrip("\r\n")
    if header != NINJA_LOG_HEADER:
      raise NinjaLogError(f"Unknown ninja log header: {header!r}")

    for line in f:
      entry = parse_entry(line.rstrip("\r\n"))
      if entry.end < prev_end:
        entries = []
      prev_end = entry.end
      entries.append(entry)
  except (OSError, UnicodeDecodeError) as e:
    raise NinjaLogError(f"Unable to parse ninja log: {e}") from e

  entries.sort(key=lambda entry : entry.begin)
  return entries
