import logging
from typing import List

from tortoise.transactions import in_transaction

from poster.core.errors import NotFoundError, ValidationError
from poster.models import (
    CharacterConsistentGeneratedImage,
    CharacterConsistentImageRequest,
    GeneratedImage,
    ImageGenerationRequest,
    Project,
    TextSummary,
    User,
)
from poster.schemas.project import ProjectCreate, ProjectUpdate
from poster.services.ownership import get_owned_or_404, update_owned

logger = logging.getLogger("project_service")

LABEL = "Project"


class ProjectService:
    @staticmethod
    async def list_projects(user: User) -> List[Project]:
        return await Project.filter(user_id=user.id).order_by("-created_at", "-id")

    @staticmethod
    async def create_project(user: User, data: ProjectCreate) -> Project:
        project = await Project.create(user=user, name=data.name, description=data.description or None)
        logger.info("Project %s created for user %s", project.id, user.id)
        return project

    @staticmethod
    async def get_project(user: User, project_id: int) -> Project:
        return await get_owned_or_404(Project, project_id, user, LABEL)

    @staticmethod
    async def update_project(user: User, project_id: int, data: ProjectUpdate) -> Project:
        await get_owned_or_404(Project, project_id, user, LABEL)
        await update_owned(Project, project_id, user, LABEL, name=data.name, description=data.description or None)
        return await Project.get(id=project_id)

    @staticmethod
    async def delete_project(user: User, project_id: int) -> None:
        """
        Delete a project and every summary, image request and image under it.
        """
        await get_owned_or_404(Project, project_id, user, LABEL)

        async with in_transaction():
            image_request_ids = await ImageGenerationRequest.filter(project_id=project_id).values_list("id", flat=True)
            character_request_ids = await CharacterConsistentImageRequest.filter(
                project_id=project_id
            ).values_list("id", flat=True)

            await GeneratedImage.filter(image_generation_request_id__in=list(image_request_ids)).delete()
            await CharacterConsistentGeneratedImage.filter(
                character_consistent_image_request_id__in=list(character_request_ids)
            ).delete()
            await ImageGenerationRequest.filter(project_id=project_id).delete()
            await CharacterConsistentImageRequest.filter(project_id=project_id).delete()
            await TextSummary.filter(project_id=project_id).delete()
            deleted = await Project.filter(id=project_id, user_id=user.id).delete()

        if not deleted:
            raise NotFoundError(f"{LABEL} not found")
        logger.info("Project %s deleted for user %s", project_id, user.id)

    @staticmethod
    async def require_owned_project(user: User, project_id) -> Project:
        """
        Resolve the target project of a new generation record.
        """
        if project_id is None:
            raise ValidationError("Project ID is required")
        return await get_owned_or_404(Project, project_id, user, LABEL)
