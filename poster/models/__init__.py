from .user import User
from .project import Project
from .text_summary import TextSummary
from .image_generation import ImageGenerationRequest, GeneratedImage
from .character_generation import CharacterConsistentImageRequest, CharacterConsistentGeneratedImage
from .leonardo import LeonardoModel, LeonardoStyleControl
from .tool import Tool
from .enums import StrengthType, StyleControl, JobStatus

__all__ = [
    "User",
    "Project",
    "TextSummary",
    "ImageGenerationRequest",
    "GeneratedImage",
    "CharacterConsistentImageRequest",
    "CharacterConsistentGeneratedImage",
    "LeonardoModel",
    "LeonardoStyleControl",
    "Tool",
    "StrengthType",
    "StyleControl",
    "JobStatus",
]
