"""
api/routes/courses.py
---------------------
Course endpoints.

GET   /courses                List courses (?company_id=)
GET   /courses/{course_id}    Fetch one course
POST  /courses                Create a course
PATCH /courses/{course_id}    Partial update
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from iomad_admin.dependencies import IdentityDep, ServiceDep, get_current_identity
from iomad_admin.schemas.course import CourseCreate, CourseRead, CourseUpdate

router = APIRouter(
    prefix="/courses",
    tags=["Courses"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("", response_model=list[CourseRead], summary="List courses, newest first")
async def list_courses(
    service: ServiceDep,
    company_id: Optional[str] = Query(default=None, description="Only courses of this company"),
) -> list[CourseRead]:
    return [CourseRead.model_validate(r) for r in await service.courses.list(company_id=company_id)]


@router.get("/{course_id}", response_model=CourseRead, summary="Get a course by id")
async def get_course(course_id: str, service: ServiceDep) -> CourseRead:
    return CourseRead.model_validate(await service.courses.get(course_id))


@router.post(
    "",
    response_model=CourseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a course",
)
async def create_course(body: CourseCreate, service: ServiceDep, identity: IdentityDep) -> CourseRead:
    return CourseRead.model_validate(await service.courses.create(body, actor=identity))


@router.patch("/{course_id}", response_model=CourseRead, summary="Update selected course fields")
async def update_course(
    course_id: str,
    body: CourseUpdate,
    service: ServiceDep,
    identity: IdentityDep,
) -> CourseRead:
    return CourseRead.model_validate(await service.courses.update(course_id, body, actor=identity))
