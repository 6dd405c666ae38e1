"""Fixed formatting targets and boundary defaults."""

# Title rewrite
OUTPUT_TITLE_TEXT = "Output Slide"
TITLE_TYPEFACE = "Beirut"

# Typeface forced on every run of the slide
BODY_TYPEFACE = "Beirut"

# Dot bullet that replaces existing bullet/numbering styles
BULLET_TYPEFACE = "Arial"
BULLET_CHAR = "•"

# Shape classification (case-sensitive substrings of the shape name)
TEXT_BOX_MARKER = "TextBox"
TARGET_SHAPE_MARKERS = ("Chevron", "Pentagon")

# Geometry - 1 inch = 914400 EMUs
EMU_PER_INCH = 914400
TARGET_SHAPE_WIDTH_EMU = round(3.04 * EMU_PER_INCH)   # 3.04 in
TARGET_SHAPE_HEIGHT_EMU = round(1.58 * EMU_PER_INCH)  # 1.58 in
TARGET_SHAPE_GAP_EMU = 150000
TEXT_BOX_GAP_EMU = 800000

# Boundary defaults (CLI / API)
DEFAULT_ERROR_LOG = "AppErrorLog.txt"
ERROR_LOG_ENV_VAR = "SLIDE_FORMATTER_ERROR_LOG"
PPTX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
