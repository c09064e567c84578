import datetime

# pretty print a ns timestamp (either epoch or relative to another timestamp)
def time2str(time: int, relative_to: int | None = None) -> str:
  if relative_to is not None:
    time -= relative_to
    sign = "-" if time < 0 else "+"
    time = abs(time)
    return f"{sign}{time // 1000000000}.{str(time % 1000000000).zfill(9)[:3]}s"

  nano = str(time % 1000000000).zfill(9)
  return datetime.datetime.fromtimestamp(time // 1000000000).strftime("%m-%d-%Y %H:%M:%S") + "." + nano[:3] + " " + nano[3:6] + " " + nano[6:]
