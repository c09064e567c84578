# writes trace events as a chrome trace event json array
#
# loadable in chrome://tracing and ui.perfetto.dev

import json
import time
from typing import Callable, TextIO

from .trace_model import *

class TraceWriter:
  """Streams events to an open text file as soon as they are written.

  The array is left unterminated until close(), the trace viewers also
  accept a truncated array if the process dies halfway through.
  """

  def __init__(self, f: TextIO, clock: Callable[[], int] = time.time_ns):
    self.f = f
    self.clock = clock # ns since epoch
    self.first = True
    self.closed = False
    self.f.write("[")

  def now(self) -> int:
    return self.clock() // 1000

  def write_event(self, event: TraceEvent) -> None:
    if self.closed:
      raise Exception(f"Attempted to write {event} after the trace was closed")

    if not self.first:
      self.f.write(",\n")
    self.first = False
    json.dump(event.to_dict(), self.f)

  def begin(self, name: str, thread: int) -> None:
    self.write_event(TraceEvent(name, PHASE_BEGIN, self.now(), MAIN_PID, thread))

  def end(self, thread: int) -> None:
    self.write_event(TraceEvent("", PHASE_END, self.now(), MAIN_PID, thread))

  def name_thread(self, thread: int, name: str, pid: int = MAIN_PID) -> None:
    self.write_event(TraceEvent("thread_name", PHASE_METADATA, 0, pid, thread, args={"name": name}))

  def close(self) -> None:
    if self.closed:
      return

    self.f.write("]\n")
    self.closed = True

  def __enter__(self):
    return self

  def __exit__(self, *exc):
    self.close()
