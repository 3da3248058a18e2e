# tests/test_dashboard_service.py
import pytest

from iomad_admin.services.admin_service import AdminService


@pytest.fixture
async def populated(service, actor, payloads):
    companies = [
        await service.companies.create(payloads.company(shortname=f"c{n}"), actor=actor)
        for n in range(3)
    ]
    await service.companies.suspend(companies[2]["id"], True, actor=actor)
    for n in range(5):
        await service.users.create(
            payloads.user(companies[n % 2]["id"], username=f"user{n}", email=f"user{n}@x.io"),
            actor=actor,
        )
    courses = [
        await service.courses.create(payloads.course(companies[0]["id"], shortname=f"k{n}"), actor=actor)
        for n in range(2)
    ]
    for n in range(4):
        await service.licenses.create(
            payloads.license(companies[0]["id"], courses[n % 2]["id"], name=f"lic{n}"), actor=actor
        )
    return companies


async def test_counts_match_store_contents(service, populated):
    stats = await service.dashboard.get_stats()

    assert stats["total_companies"] == 3
    assert stats["active_companies"] == 2
    assert stats["suspended_companies"] == 1
    assert stats["total_users"] == 5
    assert stats["total_courses"] == 2
    assert stats["total_licenses"] == 4


async def test_recent_activity_is_capped_and_newest_first(service, populated):
    stats = await service.dashboard.get_stats()
    recent = stats["recent_activity"]

    assert len(recent) == 10
    timestamps = [row["created_at"] for row in recent]
    assert timestamps == sorted(timestamps, reverse=True)
    assert (recent[0]["action"], recent[0]["entity_type"]) == ("create", "license")


async def test_empty_store_gives_zero_counts(service):
    stats = await service.dashboard.get_stats()

    assert stats == {
        "total_companies": 0,
        "total_users": 0,
        "total_courses": 0,
        "total_licenses": 0,
        "active_companies": 0,
        "suspended_companies": 0,
        "recent_activity": [],
    }


async def test_explicit_zero_recent_limit_is_respected(store, actor, payloads):
    service = AdminService(store, recent_activity_limit=0)
    await service.companies.create(payloads.company(), actor=actor)

    stats = await service.dashboard.get_stats()

    assert stats["total_companies"] == 1
    assert stats["recent_activity"] == []
