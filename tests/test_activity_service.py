# tests/test_activity_service.py
from iomad_admin.core.security import Identity


async def test_no_identity_writes_nothing_and_does_not_raise(service, store):
    result = await service.activity.log_activity("create", "company", "c1", "Company created", actor=None)

    assert result is None
    assert store.tables["activity_logs"] == {}


async def test_text_details_are_wrapped_in_message(service, actor):
    row = await service.activity.log_activity("update", "user", "u1", "User updated", actor=actor)

    assert row["details"] == {"message": "User updated"}
    assert (row["user_id"], row["company_id"]) == ("admin-1", "platform")


async def test_structured_details_pass_through(service, actor):
    details = {"message": "Bulk import", "rows": 12, "source": "csv"}
    row = await service.activity.log_activity("create", "user", "u1", details, actor=actor)

    assert row["details"] == details


async def test_identity_without_company_logs_null_company(service):
    row = await service.activity.log_activity(
        "create", "course", "c1", "Course created", actor=Identity(user_id="u9")
    )
    assert row["company_id"] is None


async def test_recent_is_limited_newest_first_with_embeds(service, actor, payloads):
    company = await service.companies.create(payloads.company(), actor=actor)
    user = await service.users.create(payloads.user(company["id"]), actor=actor)
    member = Identity(user_id=user["id"], company_id=company["id"])
    for n in range(4):
        await service.activity.log_activity("update", "company", company["id"], f"edit {n}", actor=member)

    recent = await service.activity.recent(limit=3)

    assert [row["details"]["message"] for row in recent] == ["edit 3", "edit 2", "edit 1"]
    assert recent[0]["user"]["username"] == "jdoe"
    assert recent[0]["company"]["shortname"] == "acme"
