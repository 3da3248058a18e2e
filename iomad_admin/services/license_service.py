"""
services/license_service.py
---------------------------
Course licenses, listed with both the company and the course embedded.
"""

from iomad_admin.services.entity_service import COMPANY_EMBED, COURSE_EMBED, EntityService


class LicenseService(EntityService):

    table = "licenses"
    entity_type = "license"
    label = "License"
    embeds = (COMPANY_EMBED, COURSE_EMBED)
