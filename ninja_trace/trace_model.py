# classes representing trace viewer events

# implicit unit of time: microseconds (chrome trace event format)

PHASE_BEGIN = "B"
PHASE_END = "E"
PHASE_COMPLETE = "X"
PHASE_METADATA = "M"

# pid of the events written by the trace writer itself
MAIN_PID = 0
# pid grouping all the lanes reconstructed from the ninja log
NINJA_PID = 1

# represents a single event in the trace
class TraceEvent:
  def __init__(self, name: str, phase: str, time: int, pid: int, tid: int, dur: int | None = None, args: dict | None = None):
    self.name = name
    self.phase = phase
    self.time = time
    self.dur = dur
    self.pid = pid
    self.tid = tid
    self.args = args

  def to_dict(self) -> dict:
    d = {
      "name": self.name,
      "ph": self.phase,
      "ts": self.time,
      "pid": self.pid,
      "tid": self.tid,
    }
    if self.dur is not None:
      d["dur"] = self.dur
    if self.args is not None:
      d["args"] = self.args
    return d

  def __eq__(self, other):
    return isinstance(other, TraceEvent) and self.to_dict() == other.to_dict()

  def __str__(self):
    return f"({self.phase} '{self.name}' pid{self.pid}:tid{self.tid} [{self.time}+{self.dur}])"
  def __repr__(self):
    return str(self)
