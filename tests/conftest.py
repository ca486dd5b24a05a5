"""
Pytest fixtures and configuration for the Onium admin backend tests

This file provides shared fixtures that can be used across all test modules:
environment defaults, an in-memory stand-in for the Supabase query builder,
row factories, and an authenticated FastAPI test client.

Author: TM3
Date: 2025-10-17
"""
import os
import re
import time
import uuid
from copy import deepcopy
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "test-cloud")

from jose import jwt  # noqa: E402

JWT_SECRET = os.environ["SUPABASE_JWT_SECRET"]
ADMIN_EMAIL = "admin@onium.com"
BASE_TIME = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# In-memory Supabase query builder
# =============================================================================

class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


def _ilike(pattern: str, value) -> bool:
    wildcards = {"%": ".*", "_": "."}
    regex = "".join(wildcards.get(ch, re.escape(ch)) for ch in pattern)
    return re.fullmatch(regex, str(value or ""), flags=re.IGNORECASE | re.DOTALL) is not None


class FakeQuery:
    """Supports the subset of the PostgREST builder the repositories use"""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.mode = "select"
        self.columns = "*"
        self.count_mode = None
        self.payload = None
        self.filters = []
        self.orderings = []
        self.window = None
        self.max_rows = None

    # verbs
    def select(self, *columns, count=None):
        self.mode = "select"
        self.columns = ",".join(columns) if columns else "*"
        self.count_mode = count
        return self

    def insert(self, record):
        self.mode = "insert"
        self.payload = record
        return self

    def update(self, values):
        self.mode = "update"
        self.payload = values
        return self

    def delete(self):
        self.mode = "delete"
        return self

    # filters
    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value or str(row.get(column)) == str(value))
        return self

    def ilike(self, column, pattern):
        self.filters.append(lambda row: _ilike(pattern, row.get(column)))
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def or_(self, expression):
        clauses = []
        for part in expression.split(","):
            column, op, value = part.split(".", 2)
            if op == "eq":
                clauses.append(lambda row, c=column, v=value: str(row.get(c)) == v)
            elif op == "ilike":
                clauses.append(lambda row, c=column, v=value: _ilike(v, row.get(c)))
            else:
                raise ValueError(f"Unsupported operator in or_: {op}")
        self.db.or_expressions.append(expression)
        self.filters.append(lambda row: any(clause(row) for clause in clauses))
        return self

    def order(self, column, desc=False):
        self.orderings.append((column, desc))
        return self

    def range(self, start, end):
        self.window = (start, end)
        return self

    def limit(self, n):
        self.max_rows = n
        return self

    # execution
    def execute(self):
        self.db.calls.append((self.table, self.mode))
        if (self.table, self.mode) in self.db.failures or self.table in self.db.failures:
            raise Exception(f"simulated failure on {self.table} {self.mode}")

        rows = self.db.tables.setdefault(self.table, [])

        if self.mode == "insert":
            record = deepcopy(self.payload)
            record.setdefault("id", str(uuid.uuid4()))
            record.setdefault("created_at", datetime.now(timezone.utc).isoformat())
            rows.append(record)
            return FakeResponse([deepcopy(record)])

        matched = [row for row in rows if all(f(row) for f in self.filters)]

        if self.mode == "update":
            for row in matched:
                row.update(deepcopy(self.payload))
            return FakeResponse([deepcopy(row) for row in matched])

        if self.mode == "delete":
            self.db.tables[self.table] = [row for row in rows if row not in matched]
            return FakeResponse([deepcopy(row) for row in matched])

        for column, desc in reversed(self.orderings):
            matched = sorted(matched, key=lambda row: row.get(column), reverse=desc)

        total = len(matched)
        if self.window:
            start, end = self.window
            matched = matched[start:end + 1]
        if self.max_rows is not None:
            matched = matched[:self.max_rows]

        if self.columns.strip() != "*":
            wanted = [c.strip() for c in self.columns.split(",")]
            matched = [{c: row.get(c) for c in wanted} for row in matched]

        count = total if self.count_mode == "exact" else None
        return FakeResponse([deepcopy(row) for row in matched], count)


class FakeSupabase:
    """Tables as lists of dicts; set `failures` to make a table (or table+verb) raise"""

    def __init__(self):
        self.tables = {}
        self.failures = set()
        self.calls = []
        self.or_expressions = []
        self.auth = MagicMock()

    def table(self, name):
        return FakeQuery(self, name)

    def seed(self, table, rows):
        self.tables.setdefault(table, []).extend(deepcopy(rows))
        return rows


@pytest.fixture
def fake_supabase():
    """Fresh in-memory Supabase for each test"""
    return FakeSupabase()


# =============================================================================
# Row factories
# =============================================================================

def _ts(offset_minutes: int) -> str:
    return (BASE_TIME + timedelta(minutes=offset_minutes)).isoformat()


@pytest.fixture
def make_order():
    """Build an orders row; `minutes` offsets created_at from a fixed base time"""
    def _make(minutes=0, **overrides):
        row = {
            "id": str(uuid.uuid4()),
            "customer_name": "Ayesha Khan",
            "customer_email": "ayesha@example.com",
            "customer_phone": "03001234567",
            "customer_address": "House 1, Street 2, Islamabad",
            "special_instructions": None,
            "payment_method": "cod",
            "subtotal_price": 1000,
            "shipping_charge": 200,
            "total_price": 1200,
            "status": "pending",
            "created_at": _ts(minutes),
        }
        row.update(overrides)
        return row
    return _make


@pytest.fixture
def make_item():
    def _make(order_id, **overrides):
        row = {
            "id": str(uuid.uuid4()),
            "order_id": order_id,
            "product_id": None,
            "product_title": "Argan Oil",
            "quantity": 1,
            "price_at_purchase": 1000,
            "created_at": _ts(0),
        }
        row.update(overrides)
        return row
    return _make


@pytest.fixture
def make_product():
    def _make(minutes=0, **overrides):
        row = {
            "id": str(uuid.uuid4()),
            "slug": "argan-oil-1234",
            "title": "Argan Oil",
            "description": "<p>Cold pressed</p>",
            "price": 1500,
            "discount": 0,
            "category": "Oils",
            "image_url": "https://res.cloudinary.com/test/argan.jpg",
            "specifications": {"Volume": "100ml"},
            "stock": 20,
            "created_at": _ts(minutes),
            "updated_at": _ts(minutes),
        }
        row.update(overrides)
        return row
    return _make


@pytest.fixture
def make_deal():
    def _make(**overrides):
        row = {
            "id": str(uuid.uuid4()),
            "image_url": "https://res.cloudinary.com/test/banner.jpg",
            "link_url": "/products",
            "order_position": 1,
            "is_active": True,
            "expires_at": None,
            "created_at": _ts(0),
        }
        row.update(overrides)
        return row
    return _make


@pytest.fixture
def make_review():
    def _make(minutes=0, **overrides):
        row = {
            "id": str(uuid.uuid4()),
            "customer_name": "Bilal",
            "rating": 5,
            "comment": "Great",
            "is_approved": False,
            "image_url": None,
            "product_id": None,
            "created_at": _ts(minutes),
        }
        row.update(overrides)
        return row
    return _make


# =============================================================================
# Auth and API client
# =============================================================================

def make_token(email=ADMIN_EMAIL, sub=None, expires_in=3600, secret=JWT_SECRET, **claims):
    """Access token shaped like the ones Supabase Auth issues"""
    now = int(time.time())
    payload = {
        "sub": sub or str(uuid.uuid4()),
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "iat": now,
        "exp": now + expires_in,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def admin_token():
    return make_token()


@pytest.fixture
def auth_client_mock():
    """Stand-in for the per-request GoTrue client"""
    return MagicMock()


@pytest.fixture
def api_client(fake_supabase, auth_client_mock, admin_token):
    """
    FastAPI TestClient wired to the in-memory Supabase, with ADMIN_EMAIL in
    the admins table and its bearer token already set
    """
    from fastapi.testclient import TestClient

    from onium_admin.core.database import get_auth_client, get_supabase
    from onium_admin.main import app

    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_auth_client] = lambda: auth_client_mock
    fake_supabase.seed("admins", [{"id": "admin-1", "email": ADMIN_EMAIL}])

    client = TestClient(app)
    client.headers.update({"Authorization": f"Bearer {admin_token}"})
    yield client

    app.dependency_overrides.clear()
