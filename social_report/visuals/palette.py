"""Brand palette. These values are part of the report's visual contract."""

PRIMARY = "#5a6dfb"
SECONDARY = "#c76fe2"
HEADING = "#5a6dfb"
SUBHEADING = "#6f72db"
BODY_TEXT = "#333333"
TABLE_HEADER = "#555555"
AXIS = "#CCCCCC"
AXIS_LIGHT = "#DDDDDD"
WHITE = "#ffffff"

GRADIENT_START = "#6f72db"
GRADIENT_END = "#a4c8a1"
