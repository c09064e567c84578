import argparse
import os

# global way to access args
class Args:
  pass

def file_path(string) -> str:
  if os.path.isfile(string):
    return string
  else:
    raise argparse.ArgumentTypeError(f"{string} is not a file")

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(description="Convert a .ninja_log into a chrome trace")
  parser.add_argument("path", help="Path to the .ninja_log file", type=file_path)
  parser.add_argument("-o", "--output-path", help="Path of the trace to write", default="./trace.json")
  parser.add_argument("--start-time", help="When the ninja process started, in ns since epoch. Logs older than this are not imported", type=int, default=0)
  parser.add_argument("-r", "--render", help="Render an svg of the reconstructed lanes next to the trace", action=argparse.BooleanOptionalAction)
  parser.add_argument("-v", "--verbose", help="Output debug logs", action=argparse.BooleanOptionalAction)
  args = parser.parse_args(argv)
  for field in vars(args):
    setattr(Args, field, getattr(args, field))
  return args
