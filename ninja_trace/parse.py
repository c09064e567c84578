# CLI tool for converting ninja build logs into chrome traces

import os

from .args import Args, parse_args
from .log_config import setup_logger
from .ninja_import import import_ninja_log
from .trace_model import NINJA_PID
from .trace_writer import TraceWriter
from .visualizer import render

MAIN_THREAD = 0

def main(argv: list[str] | None = None) -> int:
  parse_args(argv)
  log = setup_logger(verbose=Args.verbose)

  with open(Args.output_path, "w", encoding="utf-8") as f, TraceWriter(f) as writer:
    writer.name_thread(MAIN_THREAD, "main")
    schedule = import_ninja_log(writer, MAIN_THREAD, Args.path, Args.start_time, log)
    for lane in sorted(set(lane for _, lane in schedule)):
      writer.name_thread(lane, f"lane {lane}", pid=NINJA_PID)

  log.info(f"Wrote {len(schedule)} ninja entries to {Args.output_path}")

  if Args.render:
    svg_path = os.path.splitext(Args.output_path)[0] + ".svg"
    render(schedule, svg_path)
    log.info(f"Rendered lanes to {svg_path}")

  return 0
