"""
Timing and layout constants for the bundled compositions.

All frame values assume 30 fps and are relative to the scene that owns
them unless noted.
"""

# Stars-given scene
STAR_FLY_DURATION = 150
STARS_BACKGROUND_FADE = (0, 10)
STARS_TEXT_DELAY = 10
STARS_TEXT_DURATION = 50
STARS_FADE_OUT = (120, 150)
STARS_BACKGROUND = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"

# Tablet scene
TABLET_SCENE_LENGTH = 150  # frames the tablet stays before hiding
TABLET_SCENE_HIDE_ANIMATION = 45
TABLET_SCENE_ENTER_ANIMATION = 16
TABLET_SCENE_ENTER_ANIMATION_DELAY = 30
TABLET_SLIDE_DISTANCE = 800
TABLET_INTENSITY = 0.68
TABLET_ASSET = "tablet.svg"

SCREEN_ROTATION_Y = 15
SCREEN_ROTATION_X = -10
SKEW_X = 7
SKEW_Y = -4
CONTENT_REST_SCALE = 0.5 * 0.8
FRAME_PADDING = 1.3
MASTER_REST_SCALE = 0.8
FRAME_TRAVEL = (-500, 250)
CONTENT_OFFSET = (350, 480)
CONTENT_PERSPECTIVE = 1200
CONTENT_SIZE = (1080, 1080)

# Zoom transition between stars and tablet (global frames)
TABLET_ENTER_DURATION = 45
ZOOM_TRANSLATE = 270
ZOOM_SCALE = 0.5
ZOOM_FADE = 0.7
TABLET_ENTERED_MARGIN = 46

# Productivity graph
BAR_DELAY = 30
BAR_STAGGER = 2
BAR_DURATION = 60
BAR_WIDTH = 30
BAR_GAP = 10
GRAPH_HEIGHT = 480
BAR_COLOR = "#181B28"
BAR_HIGHLIGHT_COLOR = "#FF6B9D"

# Wheels
WHEEL_DURATION = 100
WHEEL_HIGHLIGHT_AFTER = 5
WEEKDAY_WHEEL_RADIUS = 130
WEEKDAY_WHEEL_DELAY = 60
HOUR_WHEEL_RADIUS = 300
HOUR_WHEEL_DELAY = 70

# Opening scene
OPENING_SCENE_LENGTH = 130
OPENING_SCENE_OUT_OVERLAP = 10
OPENING_ZOOM_DELAY = 10
OPENING_ZOOM_DURATION = 60
OPENING_ZOOM_BIAS = 0.1
OPENING_START_SCALE = 2.5
OPENING_EXIT_LEAD = 20
OPENING_EXIT_DURATION = 60
OPENING_SPRING_DAMPING = 200
FOREGROUND_IMAGE = "foreground.png"
BACKGROUND_MOUNTAINS_IMAGE = "background-mountains.png"
OPENING_GRADIENT = "blueRadial"

# Audio assets
AUDIO_FILES = {
    "background-music": "music/robots-preview.mp3",
    "stars-whoosh": "first-whoosh.mp3",
    "tablet-entry": "decelerate.mp3",
    "bars-animate": "wham.mp3",
    "weekday-wheel": "weigh.mp3",
    "hour-wheel": "weigh.mp3",
    "rocket-launch": "rocket-launch.mp3",
    "opening-whoosh": "first-whoosh.mp3",
}

AUDIO_VOLUMES = {
    "background-music": 0.3,
    "stars-whoosh": 0.5,
    "tablet-entry": 0.6,
    "bars-animate": 0.4,
    "weekday-wheel": 0.5,
    "hour-wheel": 0.5,
    "rocket-launch": 1.0,
    "opening-whoosh": 0.5,
}

# Wheel sounds lead the wheel's own delay (relative to the tablet scene)
WEEKDAY_WHEEL_SOUND_DELAY = 45
HOUR_WHEEL_SOUND_DELAY = 70
OPENING_LAUNCH_PREROLL = 20
OPENING_WHOOSH_LEAD = 60

# Opening title pane
OPENING_TITLE_ENTER_DELAY = 50
OPENING_TITLE_ENTER_DURATION = 50
OPENING_TITLE_SWAY = (60, 120)
OPENING_TITLE_SWAY_DEGREES = 10
OPENING_TITLE_EXIT_TILT = 0.2  # turns of pi
OPENING_TITLE_EXIT_TRAVEL = -400
OPENING_FOREGROUND_EXIT_TRAVEL = 200
OPENING_MOUNTAINS_DROP = 500
OPENING_HIGHLIGHT_DELAY = 70
OPENING_HIGHLIGHT_DURATION = 20
OPENING_LONG_LOGIN = 18
ROCKET_THEMES = ("blue", "orange", "yellow")
