# Visualizes the lane timeline reconstructed from a ninja log:
#   each track mapped to a lane, each block to a command
# export as an svg image

from .ninja_log import NinjaLogEntry

import xml.etree.ElementTree as ET

TIME_SCALE = 1 / 10 # px per ms
TRACK_HEIGHT = 40
MARGIN_PADDING = 50
LABEL_WIDTH = 80
BLOCK_HEIGHT = 30
BLOCK_BORDER_THICKNESS = 1
TRACK_LINE_HEIGHT = 1
MARKER_FONT_SIZE = 8
MARKER_INTERVAL = 1000 # ms between time markers

def rgb(r: float, g: float, b: float) -> str:
  return f"rgb({round(r * 255)}, {round(g * 255)}, {round(b * 255)})"

BG_COLOR = rgb(1, 1, 1)
LANE_COLORS = [ rgb(1, 0.8, 0.8), rgb(1, 0.9, 0.8), rgb(1, 1, 0.8), rgb(0.9, 1, 0.8), rgb(0.8, 1, 0.8)]
BLOCK_BORDER_COLOR = rgb(0, 0, 0)
TRACK_LINE_COLOR = rgb(0.5, 0.5, 0.5)

def render(schedule: list[tuple[NinjaLogEntry, int]], output_path: str):
  lane_count = max([ lane for _, lane in schedule ], default=-1) + 1
  init_time = min([ entry.begin for entry, _ in schedule ], default=0)
  completion_time = max([ entry.end for entry, _ in schedule ], default=0)
  duration = max(completion_time - init_time, 0)

  img_width = duration * TIME_SCALE + LABEL_WIDTH + MARGIN_PADDING * 2
  img_height = lane_count * TRACK_HEIGHT + MARGIN_PADDING * 2
  svg = ET.Element("svg", xmlns="http://www.w3.org/2000/svg", width=f"{img_width}", height=f"{img_height}")
  geo_group = ET.SubElement(svg, "g")
  ui_group = ET.SubElement(svg, "g")

  def lane_y(lane: int) -> float:
    return lane * TRACK_HEIGHT + MARGIN_PADDING

  def time_x(time: int) -> float:
    return (time - init_time) * TIME_SCALE + LABEL_WIDTH + MARGIN_PADDING

  def rect_font_size(width, height, text):
    return min(height, width * 2 / max(len(text), 1))

  def draw_text(x, y, text, font_size, anchor="middle"):
    ET.SubElement(ui_group, "text", x=str(x), y=str(y), fill="black", attrib={ "font-size": str(font_size), "dominant-baseline": "middle", "text-anchor": anchor }).text = text

  def draw_box(x=0, y=0, width=0, height=0, fill="white", stroke="black", stroke_width=0, text="", font_size=15):
    ET.SubElement(geo_group, "rect", x=str(x), y=str(y), width=str(width), height=str(height), stroke=stroke, fill=fill, attrib={"stroke-width": str(stroke_width)})
    if len(text) > 0:
      draw_text(x + width * 0.5, y + height * 0.5, text, font_size)

  draw_box(0, 0, img_width, img_height, BG_COLOR)

  def draw_block(entry: NinjaLogEntry, lane: int):
    width = max(entry.end - entry.begin, 0) * TIME_SCALE
    rx = time_x(entry.begin)
    ry = lane_y(lane) + TRACK_HEIGHT - BLOCK_HEIGHT
    color = LANE_COLORS[lane % len(LANE_COLORS)]

    # border
    draw_box(rx, ry, width, BLOCK_HEIGHT, fill=BLOCK_BORDER_COLOR)
    if width > BLOCK_BORDER_THICKNESS * 2:
      # body
      draw_box(
        rx + BLOCK_BORDER_THICKNESS, ry + BLOCK_BORDER_THICKNESS,
        width - BLOCK_BORDER_THICKNESS * 2, BLOCK_HEIGHT - BLOCK_BORDER_THICKNESS * 2,
        text = entry.name,
        font_size = rect_font_size(width, BLOCK_HEIGHT, entry.name),
        fill = color
      )

  for entry, lane in schedule:
    draw_block(entry, lane)

  # draw lane labels and track lines
  for lane in range(lane_count):
    y = lane_y(lane)
    draw_text(MARGIN_PADDING, y + TRACK_HEIGHT - BLOCK_HEIGHT * 0.5, f"lane {lane}", MARKER_FONT_SIZE * 1.5, anchor="start")
    draw_box(MARGIN_PADDING, y + TRACK_HEIGHT, img_width - MARGIN_PADDING * 2, TRACK_LINE_HEIGHT, TRACK_LINE_COLOR)

  # draw time markers along the top
  for time in range(0, duration + 1, MARKER_INTERVAL):
    draw_text(time_x(init_time + time), MARGIN_PADDING * 0.5, f"{time // 1000}s", MARKER_FONT_SIZE)

  tree = ET.ElementTree(svg)
  tree.write(output_path)
