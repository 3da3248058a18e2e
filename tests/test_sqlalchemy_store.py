# tests/test_sqlalchemy_store.py
import pytest

from iomad_admin.schemas.company import CompanyUpdate
from iomad_admin.services.admin_service import AdminService
from iomad_admin.store.exceptions import IntegrityViolation, RecordNotFound, StoreError

COMPANY = {"name": "Acme", "shortname": "acme", "city": "Lisbon", "country": "PT", "theme": "default"}


async def test_insert_get_round_trip(sql_store):
    row = await sql_store.insert("companies", COMPANY)

    fetched = await sql_store.get("companies", row["id"])

    assert fetched == row
    assert len(row["id"]) == 36
    assert row["suspended"] is False
    assert row["created_at"] is not None


async def test_select_orders_newest_first_and_filters(sql_store):
    for shortname in ("a", "b", "c"):
        await sql_store.insert("companies", {**COMPANY, "shortname": shortname})
    await sql_store.insert("companies", {**COMPANY, "shortname": "d", "suspended": True})

    active = await sql_store.select("companies", filters={"suspended": False})
    projected = await sql_store.select("companies", columns=("id", "suspended"), order_by=None)

    assert [row["shortname"] for row in active] == ["c", "b", "a"]
    assert sorted(row["suspended"] for row in projected) == [False, False, False, True]
    assert set(projected[0]) == {"id", "suspended"}


async def test_unknown_column_is_store_error(sql_store):
    with pytest.raises(StoreError):
        await sql_store.select("companies", filters={"colour": "red"})


async def test_update_missing_and_delete_missing(sql_store):
    with pytest.raises(RecordNotFound):
        await sql_store.update("companies", "missing", {"city": "Porto"})
    with pytest.raises(RecordNotFound):
        await sql_store.delete("companies", "missing")


async def test_foreign_keys_are_enforced(sql_store):
    with pytest.raises(IntegrityViolation):
        await sql_store.insert(
            "users",
            {"username": "jdoe", "email": "j@x.io", "firstname": "J", "lastname": "D",
             "company_id": "no-such-company"},
        )


async def test_transaction_rolls_back_on_error(sql_store):
    with pytest.raises(RuntimeError):
        async with sql_store.transaction():
            await sql_store.insert("companies", COMPANY)
            raise RuntimeError("boom")

    assert await sql_store.select("companies") == []


async def test_service_flow_on_sql_store(sql_store, actor, payloads):
    service = AdminService(sql_store)
    company = await service.companies.create(payloads.company(), actor=actor)
    user = await service.users.create(payloads.user(company["id"]), actor=actor)

    assert user["company"]["id"] == company["id"]

    updated = await service.companies.update(company["id"], CompanyUpdate(city="Porto"), actor=actor)
    assert updated["city"] == "Porto"
    assert updated["updated_at"] > company["updated_at"]

    with pytest.raises(IntegrityViolation):
        await service.companies.delete(company["id"], actor=actor)

    logs = await sql_store.select("activity_logs", order_by="created_at", descending=False)
    assert [log["action"] for log in logs] == ["create", "create", "update"]


async def test_audit_failure_rolls_back_on_sql_store(sql_store, actor, payloads, monkeypatch):
    service = AdminService(sql_store)

    async def failing_log(*args, **kwargs):
        raise StoreError("activity_logs unavailable")

    monkeypatch.setattr(service.activity, "log_activity", failing_log)

    with pytest.raises(StoreError):
        await service.companies.create(payloads.company(), actor=actor)
    assert await sql_store.select("companies") == []


async def test_dashboard_reads_run_concurrently_on_sql_store(sql_store, actor, payloads):
    service = AdminService(sql_store, recent_activity_limit=3)
    first = await service.companies.create(payloads.company(shortname="one"), actor=actor)
    await service.companies.create(payloads.company(shortname="two"), actor=actor)
    await service.companies.suspend(first["id"], True, actor=actor)

    stats = await service.dashboard.get_stats()

    assert (stats["total_companies"], stats["active_companies"], stats["suspended_companies"]) == (2, 1, 1)
    assert [log["action"] for log in stats["recent_activity"]] == ["suspend", "create", "create"]
    assert stats["recent_activity"][0]["company"] is None
