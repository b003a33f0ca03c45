"""
Default Skin - Purple on Slate

Dark slate/purple window chrome around a light content card.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE - Base colours everything derives from
    # ==========================================================================

    # Window chrome (darkest to lightest)
    'bg_window': '#0f172a',
    'bg_window_accent': '#581c87',
    'bg_card': '#ffffff',
    'bg_panel': '#f9fafb',
    'bg_code': '#1f2937',

    # Borders
    'border_light': '#e5e7eb',
    'border_mid': '#d1d5db',

    # Text
    'text_dark': '#1f2937',
    'text_mid': '#374151',
    'text_dim': '#4b5563',
    'text_muted': '#6b7280',
    'text_header': '#ffffff',
    'text_subtitle': '#e9d5ff',
    'text_code': '#4ade80',

    # ==========================================================================
    # ACCENTS
    # ==========================================================================

    'accent': '#9333ea',
    'accent_hover': '#7e22ce',
    'accent_dark': '#581c87',
    'accent_tab': '#6b21a8',
    'accent_tab_hover': '#7e22ce',

    # Neutral button (Reset)
    'neutral': '#4b5563',
    'neutral_hover': '#374151',

    # ==========================================================================
    # BITS - Current code display
    # ==========================================================================

    'bit_one_bg': '#9333ea',
    'bit_one_text': '#ffffff',
    'bit_zero_bg': '#e5e7eb',
    'bit_zero_text': '#4b5563',
    'bit_changed_bg': '#facc15',
    'bit_changed_text': '#111827',
    'bit_changed_note': '#a16207',

    # Current state panel gradient
    'state_panel_start': '#f3e8ff',
    'state_panel_end': '#dbeafe',

    # ==========================================================================
    # SEQUENCE GRID
    # ==========================================================================

    'cell_current_bg': '#9333ea',
    'cell_current_text': '#ffffff',
    'cell_visited_bg': '#dcfce7',
    'cell_visited_hover': '#bbf7d0',
    'cell_visited_text': '#374151',
    'cell_pending_bg': '#f3f4f6',
    'cell_pending_hover': '#e5e7eb',
    'cell_pending_text': '#4b5563',

    # ==========================================================================
    # CARDS - Applications tab
    # ==========================================================================

    'card_blue_bg': '#dbeafe',
    'card_blue_title': '#1e3a8a',
    'card_green_bg': '#dcfce7',
    'card_green_title': '#14532d',
    'card_purple_bg': '#f3e8ff',
    'card_purple_title': '#581c87',
    'card_orange_bg': '#ffedd5',
    'card_orange_title': '#7c2d12',
    'note_info_bg': '#eff6ff',
    'note_info_icon': '#2563eb',
    'note_warn_bg': '#fefce8',
    'note_warn_border': '#facc15',

    # ==========================================================================
    # FONTS
    # ==========================================================================

    'font_family': 'Helvetica',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',

    # Font sizes
    'font_size_display': 26,
    'font_size_title': 24,
    'font_size_section': 16,
    'font_size_label': 12,
    'font_size_small': 10,
    'font_size_tiny': 9,
}
