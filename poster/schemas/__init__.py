from .user import UserCreate, UserLogin, UserResponse, Token
from .project import ProjectCreate, ProjectUpdate, ProjectOut, DeleteResult
from .text_summary import TextSummaryRequest, TextSummaryOut
from .image_generation import ImageGenerationCreate, ImageGenerationOut, GeneratedImageOut
from .character_generation import CharacterGenerationForm, CharacterGenerationOut, CharacterGeneratedImageOut
from .leonardo import LeonardoModelOut, LeonardoStyleControlOut, ToolOut
