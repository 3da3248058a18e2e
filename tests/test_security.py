# tests/test_security.py
from datetime import timedelta

import pytest
from jose import JWTError

from iomad_admin.core.security import (
    Identity,
    create_access_token,
    decode_access_token,
    identity_from_claims,
)


def test_token_round_trip_yields_identity():
    token = create_access_token("user-1", company_id="company-1")
    assert identity_from_claims(decode_access_token(token)) == Identity("user-1", "company-1")


def test_identity_without_company_metadata():
    token = create_access_token("user-1")
    assert identity_from_claims(decode_access_token(token)).company_id is None


def test_expired_token_is_rejected():
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))
    with pytest.raises(JWTError):
        decode_access_token(token)


def test_claims_without_subject_are_rejected():
    with pytest.raises(JWTError):
        identity_from_claims({"user_metadata": {"company_id": "c1"}})


def test_empty_company_metadata_is_treated_as_absent():
    identity = identity_from_claims({"sub": "u1", "user_metadata": {"company_id": ""}})
    assert identity.company_id is None


def test_non_object_user_metadata_is_rejected():
    with pytest.raises(JWTError):
        identity_from_claims({"sub": "u1", "user_metadata": "x"})
