# Design tokens for Study Planner UI

LIGHT = {
    'background': '#F7F5FC',
    'surface': '#FFFFFF',
    'surface_alt': '#EFE9FB',
    'primary': '#9B6BDF',
    'primary_hover': '#8755D4',
    'accent': '#D16BC9',
    'text': '#3C3650',
    'text_muted': '#7D7690',
    'text_strong': '#2A1F4A',
    'border': '#E2DCEF',
    'danger': '#D9534F',
    'danger_bg': '#FBE9E8',
    'success': '#3E9B6A',
    'success_bg': '#E6F5EC',
    'badge_today_bg': '#F7E3F5',
    'badge_tomorrow_bg': '#EFE6FB',
    'badge_upcoming_bg': '#EEECF3',
}

DARK = {
    'background': '#17141F',
    'surface': '#221D2E',
    'surface_alt': '#2C2540',
    'primary': '#B48CF0',
    'primary_hover': '#C6A6F5',
    'accent': '#E08AD8',
    'text': '#E6E1F2',
    'text_muted': '#9A93AD',
    'text_strong': '#F4F0FB',
    'border': '#3A3350',
    'danger': '#F07A76',
    'danger_bg': '#3D2224',
    'success': '#6CCB98',
    'success_bg': '#1E3A2B',
    'badge_today_bg': '#46284A',
    'badge_tomorrow_bg': '#35295A',
    'badge_upcoming_bg': '#2F2A3D',
}

# pie chart slices, cycled
CHART_COLORS = [
    '#B06BE0', '#9A82E8', '#D05CC9', '#E06AA8',
    '#8A8CEB', '#C28DE6', '#9B5CCB', '#D58ADB',
]

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 13,
    'button_size': 14,
    'button_weight': 600,
    'sidebar_size': 16,
    'text': 14,
    'text_strong': 22,
}

def palette(theme):
    return DARK if theme == 'dark' else LIGHT

def build_stylesheet(theme):
    """Application QSS for the given theme name."""
    c = palette(theme)
    return f"""
QWidget {{ background: {c['background']}; color: {c['text']}; font-family: {FONTS['family']}; font-size: {FONTS['text']}px; }}
QLabel#PageTitle {{ font-size: {FONTS['text_strong']}px; font-weight: 700; color: {c['primary']}; }}
QLabel#Muted {{ color: {c['text_muted']}; }}
QListWidget#Sidebar {{ background: {c['surface']}; border: none; border-right: 1px solid {c['border']}; font-size: {FONTS['sidebar_size']}px; }}
QListWidget#Sidebar::item {{ padding: 12px 0 12px 24px; }}
QListWidget#Sidebar::item:selected {{ background: {c['surface_alt']}; color: {c['text_strong']}; border-left: 4px solid {c['primary']}; }}
QWidget#Card, QWidget#TodoItem, QWidget#DayCard {{ background: {c['surface']}; border: 1px solid {c['border']}; border-radius: 12px; }}
QLineEdit, QComboBox, QDateEdit {{ background: {c['surface']}; border: 2px solid {c['border']}; border-radius: 8px; padding: 6px 10px; }}
QLineEdit:focus, QComboBox:focus, QDateEdit:focus {{ border-color: {c['primary']}; }}
QPushButton {{ background: {c['primary']}; color: #FFFFFF; border: none; border-radius: 8px; padding: 8px 16px; font-size: {FONTS['button_size']}px; font-weight: {FONTS['button_weight']}; }}
QPushButton:hover {{ background: {c['primary_hover']}; }}
QPushButton:disabled {{ background: {c['border']}; color: {c['text_muted']}; }}
QPushButton#GhostBtn {{ background: transparent; color: {c['text_muted']}; padding: 4px 8px; }}
QPushButton#GhostBtn:hover {{ background: {c['surface_alt']}; color: {c['text_strong']}; }}
QPushButton#LinkBtn {{ background: transparent; color: {c['primary']}; padding: 2px; }}
QLabel#TimerLabel {{ font-family: monospace; font-size: {FONTS['timer_size']}px; background: {c['surface_alt']}; border-radius: 6px; padding: 2px 8px; }}
QLabel#TimerLabel[running="true"] {{ color: {c['primary']}; font-weight: 700; }}
QLabel#Badge {{ border-radius: 6px; padding: 1px 6px; font-size: 12px; }}
QLabel#Badge[kind="overdue"] {{ background: {c['danger_bg']}; color: {c['danger']}; }}
QLabel#Badge[kind="today"] {{ background: {c['badge_today_bg']}; color: {c['accent']}; }}
QLabel#Badge[kind="tomorrow"] {{ background: {c['badge_tomorrow_bg']}; color: {c['primary']}; }}
QLabel#Badge[kind="upcoming"] {{ background: {c['badge_upcoming_bg']}; color: {c['text_muted']}; }}
QLabel#Toast {{ border-radius: 10px; padding: 10px 16px; font-weight: 600; }}
QLabel#Toast[variant="error"] {{ background: {c['danger_bg']}; color: {c['danger']}; border: 1px solid {c['danger']}; }}
QLabel#Toast[variant="success"] {{ background: {c['success_bg']}; color: {c['success']}; border: 1px solid {c['success']}; }}
"""
