"""
Classrooms Router

- POST /api/v1/classrooms - 创建教室
- GET /api/v1/classrooms - 教室列表
- GET /api/v1/classrooms/{classroom_id} - 按 id 查询
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog_manager, Pagination
from api.schemas.classrooms import (
    CreateClassroomRequest,
    ClassroomResponse,
    ClassroomListResponse,
)
from core.catalog_manager import CatalogManager

router = APIRouter()


@router.post("", response_model=ClassroomResponse)
async def create_classroom(
    request: CreateClassroomRequest,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    classroom = await manager.create_classroom(
        name=request.name,
        capacity=request.capacity,
        equipment=request.equipment,
    )
    return ClassroomResponse.model_validate(classroom)


@router.get("", response_model=ClassroomListResponse)
async def list_classrooms(
    page: Pagination = Depends(),
    manager: CatalogManager = Depends(get_catalog_manager),
):
    classrooms, total = await manager.get_classrooms(limit=page.limit, offset=page.offset)
    return ClassroomListResponse(
        classrooms=[ClassroomResponse.model_validate(c) for c in classrooms],
        total=total,
    )


@router.get("/{classroom_id}", response_model=ClassroomResponse)
async def get_classroom(
    classroom_id: str,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    classroom = await manager.get_classroom(classroom_id)
    return ClassroomResponse.model_validate(classroom)
