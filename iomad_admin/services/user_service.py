"""
services/user_service.py
------------------------
Console users, each listed with its owning company embedded.
"""

from iomad_admin.services.entity_service import COMPANY_EMBED, EntityService


class UserService(EntityService):

    table = "users"
    entity_type = "user"
    label = "User"
    embeds = (COMPANY_EMBED,)
