"""
Default settings for cfgmenu.

These are the values used when no settings file exists or a key is
missing from it. Each leaf is (display name, kind, value).
"""

from enum import IntEnum

from .item import ValueKind


class ColorFormat(IntEnum):
    """Camera image color format."""
    COLOR = 0
    GRAY = 1


DEFAULT_FILENAME = "settings.xml"
DEFAULT_TAGNAME = "settings"

DEFAULT_SETTINGS = {
    # Application screen
    "screen": {
        "width": ("screen width", ValueKind.INT32, 800),
        "height": ("screen height", ValueKind.INT32, 600),
        "rate": ("screen rate", ValueKind.INT32, 60),
    },

    # Serial link to the controller board
    "serial": {
        "enabled": ("serial enabled", ValueKind.BOOL, True),
        "deviceid": ("device id", ValueKind.INT32, 0),
        "baudrate": ("baudrate", ValueKind.INT32, 115200),
    },

    # PID controller gains
    "pid": {
        "kp": ("proportional", ValueKind.DOUBLE, 0.3),
        "ki": ("integral", ValueKind.DOUBLE, 0.001),
        "kd": ("derivative", ValueKind.DOUBLE, 5.0),
    },

    # Computer vision
    "vision": {
        "displaydebug": ("display debug", ValueKind.BOOL, True),
        "trackball": ("ball tracking", ValueKind.BOOL, True),
        "ballradius": {
            "min": ("min. ball radius", ValueKind.INT32, 5),
            "max": ("max. ball radius", ValueKind.INT32, 75),
        },
    },

    # Camera
    "cam": {
        "frame": {
            "width": ("frame width", ValueKind.INT32, 640),
            "height": ("frame height", ValueKind.INT32, 480),
            "rate": ("frame rate", ValueKind.INT32, 60),
        },
        "balance": {
            "red": ("red balance", ValueKind.UINT8, 128),
            "green": ("green balance", ValueKind.UINT8, 128),
            "blue": ("blue balance", ValueKind.UINT8, 128),
            "autowhite": ("auto white bal.", ValueKind.BOOL, False),
        },
        "format": ("color format", ValueKind.INT32, int(ColorFormat.GRAY)),
        "exposure": ("exposure", ValueKind.UINT8, 20),
        "sharpness": ("sharpness", ValueKind.UINT8, 128),
        "contrast": ("contrast", ValueKind.UINT8, 128),
        "brightness": ("brightness", ValueKind.UINT8, 128),
        "hue": ("hue", ValueKind.UINT8, 128),
        "gain": ("gain", ValueKind.UINT8, 20),
        "autogain": ("auto gain", ValueKind.BOOL, False),
    },
}

# Persisted item order. Load and save both walk this sequence.
FLATTEN_ORDER = (
    "screen.width",
    "screen.height",
    "screen.rate",
    "serial.enabled",
    "serial.deviceid",
    "serial.baudrate",
    "pid.kp",
    "pid.ki",
    "pid.kd",
    "vision.displaydebug",
    "vision.trackball",
    "vision.ballradius.min",
    "vision.ballradius.max",
    "cam.frame.width",
    "cam.frame.height",
    "cam.frame.rate",
    "cam.balance.red",
    "cam.balance.blue",
    "cam.balance.green",
    "cam.balance.autowhite",
    "cam.format",
    "cam.exposure",
    "cam.sharpness",
    "cam.contrast",
    "cam.brightness",
    "cam.hue",
    "cam.gain",
    "cam.autogain",
)
