"""Tests the chrome trace writer."""

import io
import json
import unittest

from .trace_model import PHASE_COMPLETE, TraceEvent
from .trace_writer import TraceWriter

class Test_TraceWriter(unittest.TestCase):
  def setUp(self):
    self.time = 5000000
    self.out = io.StringIO()
    self.writer = TraceWriter(self.out, clock=lambda : self.time)

  def events(self) -> list[dict]:
    return json.loads(self.out.getvalue())

  def test_empty_trace(self):
    self.writer.close()
    self.assertEqual(self.events(), [])

  def test_begin_end(self):
    self.writer.begin("build", 2)
    self.time = 9000000
    self.writer.end(2)
    self.writer.close()
    self.assertEqual(self.events(), [
      { "name": "build", "ph": "B", "ts": 5000, "pid": 0, "tid": 2 },
      { "name": "", "ph": "E", "ts": 9000, "pid": 0, "tid": 2 },
    ])

  def test_complete_event(self):
    self.writer.write_event(TraceEvent("obj/a.o", PHASE_COMPLETE, 100, 1, 4, dur=50))
    self.writer.close()
    self.assertEqual(self.events(), [
      { "name": "obj/a.o", "ph": "X", "ts": 100, "dur": 50, "pid": 1, "tid": 4 },
    ])

  def test_events_written_immediately(self):
    self.writer.write_event(TraceEvent("a", PHASE_COMPLETE, 0, 1, 0, dur=1))
    self.assertIn('"name": "a"', self.out.getvalue())

  def test_name_thread(self):
    self.writer.name_thread(1, "lane 1", pid=1)
    self.writer.close()
    self.assertEqual(self.events(), [
      { "name": "thread_name", "ph": "M", "ts": 0, "pid": 1, "tid": 1, "args": { "name": "lane 1" } },
    ])

  def test_context_manager_closes(self):
    with self.writer as writer:
      writer.begin("x", 0)
    self.assertTrue(self.out.getvalue().endswith("]\n"))
    self.writer.close()
    self.assertEqual(len(self.events()), 1)

  def test_write_after_close(self):
    self.writer.close()
    with self.assertRaises(Exception):
      self.writer.begin("late", 0)

if __name__ == "__main__":
  unittest.main()
