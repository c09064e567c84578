# reconstructs the parallelism of a build from a serial ninja log
#
# ninja doesn't record which worker ran a command, so each entry is placed on
# the lowest lane that is idle by the time it begins

from typing import Iterable, Iterator

from .ninja_log import NinjaLogEntry

class LaneScheduler:
  def __init__(self):
    self.lanes: list[int] = [] # lane id -> end time of the last entry on it

  @property
  def lane_count(self) -> int:
    return len(self.lanes)

  # entries must be passed in ascending begin order
  def alloc(self, entry: NinjaLogEntry) -> int:
    for lane, end_time in enumerate(self.lanes):
      if end_time <= entry.begin:
        self.lanes[lane] = entry.end
        return lane

    self.lanes.append(entry.end)
    return len(self.lanes) - 1

def schedule_lanes(entries: Iterable[NinjaLogEntry], scheduler: LaneScheduler | None = None) -> Iterator[tuple[NinjaLogEntry, int]]:
  if scheduler is None:
    scheduler = LaneScheduler()
  for entry in entries:
    yield entry, scheduler.alloc(entry)
