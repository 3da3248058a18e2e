# tests/test_filters.py
from iomad_admin.services.filters import CompanyStatus, filter_companies, filter_users

COMPANIES = [
    {"name": "Acme Learning", "shortname": "acme", "city": "Lisbon", "suspended": False},
    {"name": "Globex", "shortname": "glx", "city": "Porto", "suspended": True},
    {"name": "Initech", "shortname": "init", "city": "Lisbon", "suspended": False},
]


def test_company_search_is_case_insensitive_over_name_shortname_city():
    assert [c["name"] for c in filter_companies(COMPANIES, search="LISBON")] == ["Acme Learning", "Initech"]
    assert [c["name"] for c in filter_companies(COMPANIES, search="glx")] == ["Globex"]


def test_company_status_filter():
    assert len(filter_companies(COMPANIES)) == 3
    assert [c["name"] for c in filter_companies(COMPANIES, status=CompanyStatus.suspended)] == ["Globex"]
    assert len(filter_companies(COMPANIES, status="active")) == 2


def test_search_and_status_combine():
    assert filter_companies(COMPANIES, search="porto", status=CompanyStatus.active) == []


def test_user_search_covers_names_email_and_username():
    users = [
        {"firstname": "Jane", "lastname": "Doe", "email": "jane@acme.io", "username": "jdoe"},
        {"firstname": "Bob", "lastname": "Smith", "email": "bob@globex.io", "username": "bsmith"},
    ]
    assert [u["username"] for u in filter_users(users, "GLOBEX")] == ["bsmith"]
    assert [u["username"] for u in filter_users(users, "doe")] == ["jdoe"]
    assert filter_users(users, "") == users
