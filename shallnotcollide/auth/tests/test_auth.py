# shallnotcollide/auth/tests/test_auth.py
import sys
from pathlib import Path

import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(PROJECT_ROOT))

from shallnotcollide.auth.core import UserStore, default_store

def test_default_accounts_authenticate():
    store = default_store()
    user = store.authenticate('controller', 'controller123')
    assert user is not None
    assert user.to_public_dict() == {'username': 'controller', 'role': 'controller'}
    assert store.authenticate('supervisor', 'supervisor123').role == 'supervisor'

def test_wrong_password_rejected():
    assert default_store().authenticate('controller', 'nope') is None

def test_unknown_user_rejected():
    assert default_store().authenticate('ghost', 'controller123') is None

def test_passwords_are_not_stored_in_clear():
    store = UserStore()
    user = store.add('alice', 's3cret')
    assert user.password_hash != 's3cret'
    assert len(store) == 1

def test_unknown_role():
    with pytest.raises(ValueError):
        UserStore().add('bob', 'pw', role='pilot')
