"""Playfield geometry, timing values and the game's enumerations."""

from enum import Enum, IntEnum


class Stage(IntEnum):
    """The stages of a game, in play order."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4


STAGE_COUNT = len(Stage)


class SceneId(Enum):
    """Identifiers of the scenes the game can switch to."""

    TITLE = "title"
    RANKING = "ranking"
    SETTING = "setting"
    MAIN = "main"
    PAUSE = "pause"
    GAME_OVER = "game_over"
    ENDING = "ending"
    NULL = "null"


class Key(Enum):
    """Keys the game watches."""

    ESCAPE = "escape"
    A = "a"
    C = "c"
    D = "d"
    P = "p"
    R = "r"
    S = "s"
    W = "w"
    X = "x"
    Z = "z"
    RETURN = "return"
    LSHIFT = "lshift"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Window and timing
MAIN_WINDOW_CLASS = "MainClass"
MAIN_WINDOW_TITLE = "Main"
MAIN_WINDOW_WIDTH = 640
MAIN_WINDOW_HEIGHT = 480
SETTING_WINDOW_WIDTH = 480
SETTING_WINDOW_HEIGHT = 480
PI = 3.14159
FPS_UPDATE_INTERVAL = 600
TARGET_FPS = 60.0

# Frame
OUT_FRAME_V_NUM = 35
OUT_FRAME_H_NUM = 46
IN_FRAME_V_NUM = 32
IN_FRAME_H_NUM = 40
FRAME_THICKNESS = 3
FRAME_LENGTH = 14
SCREEN_FRAME_SIZE = 40

# Bar
BAR_START_X = 320.0
BAR_Y = 430.0
BAR_SPEED = 8.0
BAR_THICKNESS = 10
BAR_LENGTH = 64
BAR_SLOPE_SMALL = 4.0
BAR_SLOPE_MEDIUM = 8.0
BAR_SLOPE_LARGE = 16.0
BAR_SLOPE_CHANGE_INTERVAL = 8

# Blocks
BLOCK_ROWS = 12
BLOCK_COLUMNS = 12
BLOCK_HEIGHT = 18
BLOCK_WIDTH = 42
BLOCK_START_X = 69.0
BLOCK_START_Y = 69.0

# Ball
BALL_START_X = 400.0
BALL_START_Y = 300.0
BALL_START_SPEED = 5.0
BALL_START_ANGLE = -120.0
BALL_DIAMETER = 8

# Shutter used for stage transitions
SHUTTER_START_Y = -628.0
SHUTTER_HEIGHT = 128
SHUTTER_TRANSPARENT_HEIGHT = 17
SHUTTER_WIDTH = 128
SHUTTER_SPEED = 10.0

# Lives
START_LIFE_COUNT = 3
LIFE_WIDTH = 32
LIFE_X = float((1240 - LIFE_WIDTH) // 2)
LIFE_Y = 430.0
LIFE_INTERVAL = 40.0