"""
Instructors Router

- POST /api/v1/instructors - 创建教师
- GET /api/v1/instructors - 教师列表
- GET /api/v1/instructors/available?time_slot=... - 某时间段有空的教师
- GET /api/v1/instructors/by-name/{name} - 按姓名查询
- GET /api/v1/instructors/{instructor_id} - 按 id 查询
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_manager, Pagination
from api.schemas.instructors import (
    CreateInstructorRequest,
    InstructorResponse,
    InstructorListResponse,
)
from core.catalog_manager import CatalogManager

router = APIRouter()


@router.post("", response_model=InstructorResponse)
async def create_instructor(
    request: CreateInstructorRequest,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    instructor = await manager.create_instructor(
        name=request.name,
        availability=request.availability,
        preferred_times=request.preferred_times,
    )
    return InstructorResponse.model_validate(instructor)


@router.get("", response_model=InstructorListResponse)
async def list_instructors(
    page: Pagination = Depends(),
    manager: CatalogManager = Depends(get_catalog_manager),
):
    instructors, total = await manager.get_instructors(limit=page.limit, offset=page.offset)
    return InstructorListResponse(
        instructors=[InstructorResponse.model_validate(i) for i in instructors],
        total=total,
    )


# 必须注册在 /{instructor_id} 之前
@router.get("/available", response_model=InstructorListResponse)
async def list_available_instructors(
    time_slot: str = Query(..., description="Exact time slot label"),
    manager: CatalogManager = Depends(get_catalog_manager),
):
    """列出 availability 包含该时间段的教师"""
    instructors = await manager.get_available_instructors(time_slot)
    return InstructorListResponse(
        instructors=[InstructorResponse.model_validate(i) for i in instructors],
        total=len(instructors),
    )


@router.get("/by-name/{name}", response_model=InstructorResponse)
async def get_instructor_by_name(
    name: str,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    instructor = await manager.get_instructor_by_name(name)
    return InstructorResponse.model_validate(instructor)


@router.get("/{instructor_id}", response_model=InstructorResponse)
async def get_instructor(
    instructor_id: str,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    instructor = await manager.get_instructor(instructor_id)
    return InstructorResponse.model_validate(instructor)
