"""
Central Configuration
All constants, ranges, and settings in one place
"""

# === BIT WIDTH ===
# UI range for the bits slider. The generator itself accepts any positive width.
BITS_MIN = 2
BITS_MAX = 6
BITS_DEFAULT = 3

# Widest sequence the --print table will render (2^16 rows)
PRINT_BITS_MAX = 16

# === AUTO-PLAY SPEED ===
SPEED_MIN = 200     # ms per step
SPEED_MAX = 2000
SPEED_STEP = 200
SPEED_DEFAULT = 1000

# === TABS ===
TABS = ['visualization', 'algorithm', 'applications']
TAB_LABELS = {tab: tab.capitalize() for tab in TABS}
TAB_INDEX = {tab: i for i, tab in enumerate(TABS)}
TAB_DEFAULT = 'visualization'

# === SEQUENCE GRID ===
SEQUENCE_COLUMNS = 4

# === WINDOW ===
WINDOW_TITLE = "Binary Reflected Gray Code Visualizer"
WINDOW_SUBTITLE = "Watch how consecutive codes differ by exactly one bit"

# === WIDGET SIZES ===
SIZES = {
    # Current code display
    'bit_cell': (64, 64),
    'bit_cell_changed': (72, 72),   # Changed bit pops out

    # Sequence grid
    'sequence_cell_min_width': 110,
    'sequence_cell_height': 60,

    # Buttons
    'button_transport': (110, 40),  # Play/Pause, Reset
    'button_tab': (150, 40),

    # Value read-outs beside sliders
    'value_label_width': 60,

    # Window
    'window_min': (900, 700),
    'window_default': (1100, 820),

    # Layout spacing (global)
    'spacing_tight': 4,
    'spacing_normal': 8,
    'spacing_section': 16,
    'margin_none': 0,
    'margin_normal': 12,
    'margin_panel': 24,
}


def clamp_bits(bits):
    """Clamp a bit width into the UI range."""
    return max(BITS_MIN, min(BITS_MAX, int(bits)))


def clamp_speed(speed_ms):
    """Clamp speed into range and snap to the slider step."""
    speed_ms = max(SPEED_MIN, min(SPEED_MAX, int(speed_ms)))
    steps = round((speed_ms - SPEED_MIN) / SPEED_STEP)
    return SPEED_MIN + steps * SPEED_STEP
