"""
services/department_service.py
------------------------------
Departments, each listed with its owning company embedded.
The parent/child tree is stored as-is; cycles are not detected.
"""

from iomad_admin.services.entity_service import COMPANY_EMBED, EntityService


class DepartmentService(EntityService):

    table = "departments"
    entity_type = "department"
    label = "Department"
    embeds = (COMPANY_EMBED,)
