"""
Timetables Router

- POST /api/v1/timetables - 手动创建课表条目
- GET /api/v1/timetables - 课表列表（可按 course_id 过滤）
- POST /api/v1/timetables/auto - 自动生成 课程×教师×教室 全组合
- GET /api/v1/timetables/{timetable_id} - 按 id 查询
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_timetable_manager, Pagination
from api.schemas.timetables import (
    CreateTimetableRequest,
    TimetableResponse,
    TimetableListResponse,
)
from core.timetable_manager import TimetableManager

router = APIRouter()


@router.post("", response_model=TimetableResponse)
async def create_timetable(
    request: CreateTimetableRequest,
    manager: TimetableManager = Depends(get_timetable_manager),
):
    """创建课表条目（不检查引用的 id 是否存在）"""
    entry = await manager.create_timetable(
        course_id=request.course_id,
        instructor_id=request.instructor_id,
        classroom_id=request.classroom_id,
        time_slot=request.time_slot,
    )
    return TimetableResponse.model_validate(entry)


@router.get("", response_model=TimetableListResponse)
async def list_timetables(
    course_id: Optional[str] = Query(None, description="Only entries for this course"),
    page: Pagination = Depends(),
    manager: TimetableManager = Depends(get_timetable_manager),
):
    entries, total = await manager.get_timetables(
        limit=page.limit,
        offset=page.offset,
        course_id=course_id,
    )
    return TimetableListResponse(
        timetables=[TimetableResponse.model_validate(e) for e in entries],
        total=total,
    )


@router.post("/auto", response_model=TimetableListResponse)
async def create_auto_timetable(
    manager: TimetableManager = Depends(get_timetable_manager),
):
    """
    自动生成课表

    每个 (课程, 教师, 教室) 组合生成一条，时间段统一为配置的默认值。
    不做冲突检测，重复调用会产生重复条目。
    """
    entries = await manager.create_auto_timetable()
    return TimetableListResponse(
        timetables=[TimetableResponse.model_validate(e) for e in entries],
        total=len(entries),
    )


@router.get("/{timetable_id}", response_model=TimetableResponse)
async def get_timetable(
    timetable_id: str,
    manager: TimetableManager = Depends(get_timetable_manager),
):
    entry = await manager.get_timetable(timetable_id)
    return TimetableResponse.model_validate(entry)
