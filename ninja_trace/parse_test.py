"""End to end tests of the command line tool."""

import json
import os
import runpy
import tempfile
import unittest
from unittest import mock

from .parse import main

class Test_main(unittest.TestCase):
  def setUp(self):
    self.dir = tempfile.TemporaryDirectory()
    self.addCleanup(self.dir.cleanup)
    self.log_path = os.path.join(self.dir.name, ".ninja_log")
    self.out_path = os.path.join(self.dir.name, "trace.json")
    with open(self.log_path, "w", encoding="utf-8") as f:
      f.write("# ninja log v5\n0\t10\t0\ta\th\n5\t15\t0\tb\th\n")

  def test_writes_trace(self):
    self.assertEqual(main([self.log_path, "-o", self.out_path]), 0)
    with open(self.out_path, encoding="utf-8") as f:
      events = json.load(f)

    complete = [ e for e in events if e["ph"] == "X" ]
    self.assertEqual([ (e["name"], e["tid"], e["ts"]) for e in complete ], [("a", 0, 0), ("b", 1, 5000)])
    lane_names = [ e["args"]["name"] for e in events if e["ph"] == "M" and e["pid"] == 1 ]
    self.assertEqual(lane_names, ["lane 0", "lane 1"])
    self.assertEqual([ e["ph"] for e in events if e["pid"] == 0 ], ["M", "B", "E"])

  def test_render(self):
    self.assertEqual(main([self.log_path, "-o", self.out_path, "--render"]), 0)
    self.assertTrue(os.path.exists(os.path.join(self.dir.name, "trace.svg")))

  def test_stale_log_still_writes_trace(self):
    start_time = os.stat(self.log_path).st_mtime_ns + 1
    self.assertEqual(main([self.log_path, "-o", self.out_path, "--start-time", str(start_time)]), 0)
    with open(self.out_path, encoding="utf-8") as f:
      events = json.load(f)
    self.assertEqual([ e for e in events if e["ph"] == "X" ], [])
  def test_run_as_module(self):
    with mock.patch("sys.argv", ["ninja_trace", self.log_path, "-o", self.out_path]):
      with self.assertRaises(SystemExit) as cm:
        runpy.run_module("ninja_trace", run_name="__main__")
    self.assertEqual(cm.exception.code, 0)
    self.assertTrue(os.path.exists(self.out_path))

if __name__ == "__main__":
  unittest.main()
