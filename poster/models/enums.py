from enum import Enum


class StrengthType(str, Enum):
    LOW = "Low"
    MID = "Mid"
    HIGH = "High"


class StyleControl(str, Enum):
    PRESET_STYLE = "presetStyle"
    STYLE_UUID = "styleUUID"


class JobStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"
