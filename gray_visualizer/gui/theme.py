"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in gray_visualizer/gui/skins/
"""
from .skins import active as skin

# =============================================================================
# SKIN ACCESS
# =============================================================================

def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)


FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'display': get('font_size_display'),
    'title': get('font_size_title'),
    'section': get('font_size_section'),
    'label': get('font_size_label'),
    'small': get('font_size_small'),
    'tiny': get('font_size_tiny'),
}

COLORS = {
    # Window chrome
    'window': get('bg_window'),
    'window_accent': get('bg_window_accent'),
    'card': get('bg_card'),
    'panel': get('bg_panel'),
    'code_bg': get('bg_code'),
    'border': get('border_light'),

    # Text
    'text': get('text_mid'),
    'text_dark': get('text_dark'),
    'text_dim': get('text_dim'),
    'text_muted': get('text_muted'),
    'header': get('text_header'),
    'subtitle': get('text_subtitle'),
    'code_text': get('text_code'),

    # Accents
    'accent': get('accent'),
    'accent_hover': get('accent_hover'),
    'accent_dark': get('accent_dark'),
    'tab': get('accent_tab'),
    'tab_hover': get('accent_tab_hover'),
    'neutral': get('neutral'),
    'neutral_hover': get('neutral_hover'),

    # Bits
    'bit_changed_note': get('bit_changed_note'),
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def window_style():
    """Dark slate/purple gradient behind everything."""
    return f"""
        QMainWindow, QWidget#central {{
            background: qlineargradient(
                x1:0, y1:0, x2:1, y2:1,
                stop:0 {COLORS['window']},
                stop:0.5 {COLORS['window_accent']},
                stop:1 {COLORS['window']}
            );
        }}
    """


def card_frame_style():
    """White rounded content card."""
    return f"""
        QFrame#card {{
            background-color: {COLORS['card']};
            border-radius: 8px;
        }}
    """


def button_style(state='primary'):
    """Get transport button stylesheet for state: primary, neutral."""
    if state == 'primary':
        bg, hover = COLORS['accent'], COLORS['accent_hover']
    else:
        bg, hover = COLORS['neutral'], COLORS['neutral_hover']
    return f"""
        QPushButton {{
            background-color: {bg};
            color: {COLORS['header']};
            border: none;
            border-radius: 6px;
            padding: 8px 18px;
            font-size: {FONT_SIZES['label']}px;
        }}
        QPushButton:hover {{
            background-color: {hover};
        }}
    """


def tab_button_style(active=False):
    """Tab header button - white when selected."""
    if active:
        return f"""
            QPushButton {{
                background-color: {COLORS['card']};
                color: {COLORS['accent_dark']};
                border: none;
                border-top-left-radius: 6px;
                border-top-right-radius: 6px;
                font-weight: bold;
                font-size: {FONT_SIZES['label']}px;
            }}
        """
    return f"""
        QPushButton {{
            background-color: {COLORS['tab']};
            color: {COLORS['header']};
            border: none;
            border-top-left-radius: 6px;
            border-top-right-radius: 6px;
            font-weight: bold;
            font-size: {FONT_SIZES['label']}px;
        }}
        QPushButton:hover {{
            background-color: {COLORS['tab_hover']};
        }}
    """


def slider_style():
    """Horizontal range slider."""
    return f"""
        QSlider::groove:horizontal {{
            height: 6px;
            background: {COLORS['border']};
            border-radius: 3px;
        }}
        QSlider::sub-page:horizontal {{
            background: {COLORS['accent']};
            border-radius: 3px;
        }}
        QSlider::handle:horizontal {{
            width: 16px;
            height: 16px;
            margin: -5px 0;
            background: {COLORS['accent']};
            border-radius: 8px;
        }}
        QSlider::handle:horizontal:hover {{
            background: {COLORS['accent_hover']};
        }}
    """


def bit_cell_style(bit, changed=False):
    """Single bit in the current code display. Changed bit wins over value."""
    if changed:
        bg, fg = get('bit_changed_bg'), get('bit_changed_text')
    elif bit == '1':
        bg, fg = get('bit_one_bg'), get('bit_one_text')
    else:
        bg, fg = get('bit_zero_bg'), get('bit_zero_text')
    return f"""
        QLabel {{
            background-color: {bg};
            color: {fg};
            border-radius: 8px;
        }}
    """


def sequence_cell_style(state='pending'):
    """Sequence grid cell for state: current, visited, pending."""
    if state == 'current':
        return f"""
            QFrame {{
                background-color: {get('cell_current_bg')};
                border-radius: 8px;
            }}
            QLabel {{
                color: {get('cell_current_text')};
                background: transparent;
            }}
        """
    return f"""
        QFrame {{
            background-color: {get(f'cell_{state}_bg')};
            border-radius: 8px;
        }}
        QFrame:hover {{
            background-color: {get(f'cell_{state}_hover')};
        }}
        QLabel {{
            color: {get(f'cell_{state}_text')};
            background: transparent;
        }}
    """


def state_panel_style():
    """Purple-to-blue gradient behind the current code."""
    return f"""
        QFrame#statePanel {{
            background: qlineargradient(
                x1:0, y1:0, x2:1, y2:0,
                stop:0 {get('state_panel_start')},
                stop:1 {get('state_panel_end')}
            );
            border-radius: 8px;
        }}
    """


def code_block_style():
    """Dark monospace listing for the Algorithm tab."""
    return f"""
        QLabel {{
            background-color: {COLORS['code_bg']};
            color: {COLORS['code_text']};
            border-radius: 4px;
            padding: 12px;
        }}
    """


def info_card_style(accent):
    """Application card background for accent: card_blue, card_green, ..."""
    return f"""
        QFrame {{
            background-color: {get(f'{accent}_bg')};
            border-radius: 8px;
        }}
        QLabel {{
            background: transparent;
        }}
    """


def note_style(kind='info'):
    """Call-out box for kind: info, warn."""
    if kind == 'warn':
        return f"""
            QFrame {{
                background-color: {get('note_warn_bg')};
                border-left: 4px solid {get('note_warn_border')};
                border-radius: 8px;
            }}
            QLabel {{
                background: transparent;
                border: none;
            }}
        """
    return f"""
        QFrame {{
            background-color: {get('note_info_bg')};
            border-radius: 8px;
        }}
        QLabel {{
            background: transparent;
        }}
    """
