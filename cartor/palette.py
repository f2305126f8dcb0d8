"""ANSI style sequences and box-drawing glyphs used by the console helpers."""

# Text attributes
RESET = "\033[0m"
BOLD = "\033[1m"
ITALIC = "\033[3m"
UNDERLINE = "\033[4m"
REVERSE = "\033[7m"

# Foreground colours
PINK = "\033[38;5;201m"
RED = "\033[31m"
YELLOW = "\033[33m"
ORANGE = "\033[38;5;208m"
GREEN = "\033[32m"
TEAL = "\033[38;5;37m"
CYAN = "\033[36m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
WHITE = "\033[37m"
GRAY = "\033[90m"
DARK_GRAY = "\033[90m"

LIGHT_RED = "\033[91m"
LIGHT_YELLOW = "\033[93m"
LIGHT_GREEN = "\033[92m"
LIGHT_TEAL = "\033[38;5;45m"
LIGHT_CYAN = "\033[96m"
LIGHT_BLUE = "\033[94m"
LIGHT_MAGENTA = "\033[95m"
LIGHT_WHITE = "\033[97m"
LIGHT_GRAY = "\033[37m"

# Background colours
BG_RED = "\033[41m"
BG_YELLOW = "\033[43m"
BG_ORANGE = "\033[48;5;208m"
BG_GREEN = "\033[42m"
BG_TEAL = "\033[48;5;37m"
BG_CYAN = "\033[46m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_WHITE = "\033[47m"
BG_GRAY = "\033[100m"
BG_DARK_GRAY = "\033[100m"

# Semantic styles
NUMBER = BOLD + PINK
VARIABLE = GREEN
LINE = WHITE
BOLD_LINE = BOLD + LINE

# Corners
ROUND_CORNER_UP_RIGHT = "╰"
ROUND_CORNER_UP_LEFT = "╯"
ROUND_CORNER_DOWN_RIGHT = "╭"
ROUND_CORNER_DOWN_LEFT = "╮"

CORNER_UP_RIGHT = "└"
CORNER_UP_LEFT = "┘"
CORNER_DOWN_RIGHT = "┌"
CORNER_DOWN_LEFT = "┐"

# Junctions
TEE_UP = "┴"
TEE_DOWN = "┬"
TEE_RIGHT = "├"
TEE_LEFT = "┤"
CROSS = "┼"

BOLD_TEE_UP = "┻"
BOLD_UP_TEE_UP = "┸"
BOLD_HORIZONTAL_TEE_UP = "┷"
BOLD_RIGHT_TEE_UP = "┶"
BOLD_LEFT_TEE_UP = "┵"
BOLD_UP_RIGHT_TEE_UP = "┺"
BOLD_UP_LEFT_TEE_UP = "┹"

BOLD_TEE_DOWN = "┳"
BOLD_DOWN_TEE_DOWN = "┰"
BOLD_HORIZONTAL_TEE_DOWN = "┯"
BOLD_RIGHT_TEE_DOWN = "┮"
BOLD_LEFT_TEE_DOWN = "┭"
BOLD_DOWN_RIGHT_TEE_DOWN = "┲"
BOLD_DOWN_LEFT_TEE_DOWN = "┱"

# Short strokes
SHORT_UP = "╵"
SHORT_DOWN = "╷"
SHORT_RIGHT = "╶"
SHORT_LEFT = "╴"

BOLD_SHORT_UP = "╸"
BOLD_SHORT_DOWN = "╹"
BOLD_SHORT_RIGHT = "╺"
BOLD_SHORT_LEFT = "╻"

HORIZONTAL = "─"
VERTICAL = "│"

# Line endings and starts
FADE_END = "╌┄┈"
FADE_START = "┄┈╌"

BRACKET_END = "{"
BRACKET_START = "}"

CIRCLE_END = "◯"
CIRCLE_START = "◯"
SQUARE_END = "□"
SQUARE_START = "□"
DIAMOND_END = "◇"
DIAMOND_START = "◇"
ARROW_END = "◁"
ARROW_START = "▷"

ROUND_SQUARE_END = "▢"
ROUND_SQUARE_START = "▢"
FILLED_SQUARE_END = "■"
FILLED_SQUARE_START = "■"

# Line bodies
LINE_H = "─"
LINE_V = "│"

LINE_H_PIPE = "═"
LINE_V_PIPE = "║"
LINE_H_RIGHT = "╶"
LINE_H_LEFT = "╴"
LINE_V_UP = "╵"
LINE_V_DOWN = "╷"

LINE_H_DOTTED_2 = "╌"
LINE_H_DOTTED_3 = "┄"
LINE_H_DOTTED_4 = "┈"

LINE_V_DOTTED_2 = "╎"
LINE_V_DOTTED_3 = "┆"
LINE_V_DOTTED_4 = "┊"

BOLD_LINE_H = "─"
BOLD_LINE_V = "│"

BOLD_LINE_H_PIPE = "═"
BOLD_LINE_V_PIPE = "║"
BOLD_LINE_H_RIGHT = "╶"
BOLD_LINE_H_LEFT = "╴"
BOLD_LINE_V_UP = "╵"
BOLD_LINE_V_DOWN = "╷"

BOLD_LINE_H_DOTTED_2 = "╌"
BOLD_LINE_H_DOTTED_3 = "┄"
BOLD_LINE_H_DOTTED_4 = "┈"

BOLD_LINE_V_DOTTED_2 = "╎"
BOLD_LINE_V_DOTTED_3 = "┆"
BOLD_LINE_V_DOTTED_4 = "┊"