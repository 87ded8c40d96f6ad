from typing import List

from fastapi import APIRouter, Depends

from poster.api.deps import get_current_user
from poster.models import User
from poster.schemas.project import DeleteResult, ProjectCreate, ProjectOut, ProjectUpdate
from poster.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=List[ProjectOut])
async def list_projects(user: User = Depends(get_current_user)):
    """Projects of the current user, newest first"""
    return await ProjectService.list_projects(user)


@router.post("", response_model=ProjectOut)
async def create_project(data: ProjectCreate, user: User = Depends(get_current_user)):
    return await ProjectService.create_project(user, data)


@router.get("/{project_id}", response_model=ProjectOut)
async def get_project(project_id: int, user: User = Depends(get_current_user)):
    return await ProjectService.get_project(user, project_id)


@router.patch("/{project_id}", response_model=ProjectOut)
async def update_project(project_id: int, data: ProjectUpdate, user: User = Depends(get_current_user)):
    return await ProjectService.update_project(user, project_id, data)


@router.delete("/{project_id}", response_model=DeleteResult)
async def delete_project(project_id: int, user: User = Depends(get_current_user)):
    """Deletes the project together with everything generated under it"""
    await ProjectService.delete_project(user, project_id)
    return DeleteResult()
