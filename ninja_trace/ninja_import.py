# imports the commands recorded in a .ninja_log into a trace

import logging
import os

from .ninja_log import NinjaLogEntry, NinjaLogError, read_ninja_log
from .lane_scheduler import LaneScheduler, schedule_lanes
from .pretty_time import time2str
from .trace_model import *
from .trace_writer import TraceWriter

IMPORT_EVENT_NAME = "ninja log import"

def import_ninja_log(writer: TraceWriter, thread: int, filename: str, start_time: int, log: logging.Logger) -> list[tuple[NinjaLogEntry, int]]:
  """Reads a .ninja_log file and writes one complete event per command to the trace.

  start_time (ns since epoch) is when the ninja process started. It positions
  the relative times of the log in the trace, and a log that hasn't been
  modified since then means ninja had nothing to run.

  Problems with the log are logged, never raised: the import is best effort.
  Returns the (entry, lane) pairs that were written.
  """
  writer.begin(IMPORT_EVENT_NAME, thread)
  try:
    return _import_ninja_log(writer, filename, start_time, log)
  finally:
    writer.end(thread)

def _import_ninja_log(writer: TraceWriter, filename: str, start_time: int, log: logging.Logger) -> list[tuple[NinjaLogEntry, int]]:
  try:
    stat = os.stat(filename)
  except OSError as e:
    log.info(f"Missing ninja log: {e}")
    return []

  if stat.st_mtime_ns < start_time:
    log.debug(f"Ninja log not modified since {time2str(start_time)}, not importing any entries.")
    return []

  try:
    f = open(filename, encoding="utf-8")
  except OSError as e:
    log.info(f"Error opening ninja log: {e}")
    return []

  with f:
    try:
      entries = read_ninja_log(f)
    except NinjaLogError as e:
      log.info(str(e))
      return []

  offset = start_time // 1000
  scheduler = LaneScheduler()
  schedule: list[tuple[NinjaLogEntry, int]] = []
  for entry, lane in schedule_lanes(entries, scheduler):
    writer.write_event(TraceEvent(
      entry.name,
      PHASE_COMPLETE,
      offset + entry.begin * 1000,
      NINJA_PID,
      lane,
      dur=(entry.end - entry.begin) * 1000,
    ))
    schedule.append((entry, lane))

  build_end = max([ entry.end for entry in entries ], default=0)
  log.debug(f"Imported {len(schedule)} ninja log entries on {scheduler.lane_count} lanes, last one ending at {time2str(start_time + build_end * 1000000, relative_to=start_time)}")
  return schedule
