"""
Constants and configuration values for Fauxtoshop.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Reserved colors (24-bit packed RGB)
WHITE = 0xFFFFFF
BLACK = 0x000000
GREEN = 0x00FF00
MAX_PACKED_COLOR = 0xFFFFFF
CHANNEL_MAX = 255

# Filter type names
FILTER_SCATTER = "Scatter"
FILTER_EDGE_DETECTION = "Edge Detection"
FILTER_GREEN_SCREEN = "Green Screen"
FILTER_COMPARE = "Compare"

# Menu numbers shown by the console
FILTER_MENU = {
    "1": FILTER_SCATTER,
    "2": FILTER_EDGE_DETECTION,
    "3": FILTER_GREEN_SCREEN,
    "4": FILTER_COMPARE,
}

# Parameter ranges
SCATTER_RADIUS_MIN = 1
SCATTER_RADIUS_MAX = 100
EDGE_THRESHOLD_MIN = 1
GREEN_SCREEN_TOLERANCE_MIN = 1

# Upper bound on rejection sampling redraws for a single scatter cell.
# A 1x1 grid at radius 100 needs ~40401 draws on average.
MAX_SCATTER_ATTEMPTS = 2_000_000

# Node field names
FIELD_NODE_ID = "id"
FIELD_NODE_TYPE = "type"
FIELD_RADIUS = "radius"
FIELD_THRESHOLD = "threshold"
FIELD_TOLERANCE = "tolerance"
FIELD_PLACE_ROW = "place_row"
FIELD_PLACE_COL = "place_col"

# File naming
DEFAULT_OUTPUT_FORMAT = "PNG"
DEFAULT_JPEG_QUALITY = 95
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}

# Display
WINDOW_TITLE = "Fauxtoshop"

# Console prompts
PROMPT_OPEN_IMAGE = "Enter name of image file to open (or blank to quit): "
PROMPT_FILTER_HEADER = "Which image filter would you like to apply? \n"
PROMPT_FILTER_ITEM = "\t {number} - {label} \n"
PROMPT_FILTER_FOOTER = "Your choice: "
PROMPT_SCATTER_RADIUS = "Enter degree of scatter [1-100]: "
PROMPT_EDGE_THRESHOLD = "Enter threshold for edge detection: "
PROMPT_STICKER_IMAGE = "Enter name of sticker image file to open: "
PROMPT_TOLERANCE = "Please enter a green screen tolerance: "
PROMPT_LOCATION = "Enter location to place image as \"(row,col)\" or blank to use mouse: "
PROMPT_COMPARE_IMAGE = "Enter name of image file to compare with: "
PROMPT_SAVE_IMAGE = "Enter filename to save image (or blank to skip saving): "

MESSAGE_WELCOME = "Welcome to Fauxtoshop!"
MESSAGE_ILLEGAL_INTEGER = "Illegal integer format. Try again."
MESSAGE_CHOOSE_STICKER = "Now choose another file to add to your background image."
MESSAGE_CLICK_TO_PLACE = "Now click the background image to place new image: "
MESSAGE_NO_MOUSE = "Mouse placement is not available; enter a location instead."
MESSAGE_IMAGES_SAME = "These images are the same!"
MESSAGE_IMAGES_DIFFER = "These images differ in {count} pixel locations!"
