"""
services/course_service.py
--------------------------
Courses, each listed with its owning company embedded.
"""

from iomad_admin.services.entity_service import COMPANY_EMBED, EntityService


class CourseService(EntityService):

    table = "courses"
    entity_type = "course"
    label = "Course"
    embeds = (COMPANY_EMBED,)
