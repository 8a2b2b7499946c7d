"""
Courses Router

- POST /api/v1/courses - 创建课程
- GET /api/v1/courses - 课程列表
- GET /api/v1/courses/by-name/{name} - 按名称查询
- GET /api/v1/courses/{course_id} - 按 id 查询
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog_manager, Pagination
from api.schemas.courses import (
    CreateCourseRequest,
    CourseResponse,
    CourseListResponse,
)
from core.catalog_manager import CatalogManager

router = APIRouter()


@router.post("", response_model=CourseResponse)
async def create_course(
    request: CreateCourseRequest,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    course = await manager.create_course(
        name=request.name,
        duration_years=request.duration_years,
        required_equipment=request.required_equipment,
        prerequisites=request.prerequisites,
    )
    return CourseResponse.model_validate(course)


@router.get("", response_model=CourseListResponse)
async def list_courses(
    page: Pagination = Depends(),
    manager: CatalogManager = Depends(get_catalog_manager),
):
    courses, total = await manager.get_courses(limit=page.limit, offset=page.offset)
    return CourseListResponse(
        courses=[CourseResponse.model_validate(c) for c in courses],
        total=total,
    )


@router.get("/by-name/{name}", response_model=CourseResponse)
async def get_course_by_name(
    name: str,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    course = await manager.get_course_by_name(name)
    return CourseResponse.model_validate(course)


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(
    course_id: str,
    manager: CatalogManager = Depends(get_catalog_manager),
):
    course = await manager.get_course(course_id)
    return CourseResponse.model_validate(course)
