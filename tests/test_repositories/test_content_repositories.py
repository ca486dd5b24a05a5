"""
Unit tests for the deal, review and admin repositories

Author: TM3
Date: 2025-10-17
"""
from onium_admin.domain.deal import DealCreate
from onium_admin.repositories.admin_repository import AdminRepository
from onium_admin.repositories.deal_repository import DealRepository
from onium_admin.repositories.review_repository import ReviewRepository


class TestDealRepository:
    """Test DealRepository methods"""

    def test_find_all_in_display_order(self, fake_supabase, make_deal):
        fake_supabase.seed("deals", [
            make_deal(order_position=3, link_url="/c"),
            make_deal(order_position=1, link_url="/a"),
            make_deal(order_position=2, link_url="/b"),
        ])

        deals = DealRepository(fake_supabase).find_all()

        assert [d.link_url for d in deals] == ["/a", "/b", "/c"]

    def test_create(self, fake_supabase):
        deal = DealRepository(fake_supabase).create(
            DealCreate(image_url="https://img/banner.jpg", link_url="/sale", order_position=2)
        )

        assert deal.is_active is True
        assert fake_supabase.tables["deals"][0]["link_url"] == "/sale"

    def test_toggle_active(self, fake_supabase, make_deal):
        """Test toggling flips is_active each time"""
        row = fake_supabase.seed("deals", [make_deal(is_active=True)])[0]
        repo = DealRepository(fake_supabase)

        assert repo.toggle_active(row["id"]).is_active is False
        assert repo.toggle_active(row["id"]).is_active is True

    def test_toggle_missing(self, fake_supabase):
        assert DealRepository(fake_supabase).toggle_active("missing") is None

    def test_delete(self, fake_supabase, make_deal):
        row = fake_supabase.seed("deals", [make_deal()])[0]

        assert DealRepository(fake_supabase).delete(row["id"]) is True
        assert fake_supabase.tables["deals"] == []


class TestReviewRepository:
    """Test ReviewRepository methods"""

    def test_count_pending(self, fake_supabase, make_review):
        fake_supabase.seed("reviews", [
            make_review(is_approved=False),
            make_review(is_approved=False),
            make_review(is_approved=True),
        ])

        assert ReviewRepository(fake_supabase).count_pending() == 2

    def test_find_all_filters_by_approval(self, fake_supabase, make_review):
        fake_supabase.seed("reviews", [
            make_review(minutes=1, customer_name="Old", is_approved=True),
            make_review(minutes=2, customer_name="Pending"),
            make_review(minutes=3, customer_name="New", is_approved=True),
        ])
        repo = ReviewRepository(fake_supabase)

        assert [r.customer_name for r in repo.find_all(approved=True)] == ["New", "Old"]
        assert [r.customer_name for r in repo.find_all(approved=False)] == ["Pending"]
        assert len(repo.find_all()) == 3

    def test_toggle_approval(self, fake_supabase, make_review):
        row = fake_supabase.seed("reviews", [make_review(is_approved=False)])[0]

        review = ReviewRepository(fake_supabase).toggle_approval(row["id"])

        assert review.is_approved is True
        assert fake_supabase.tables["reviews"][0]["is_approved"] is True

    def test_toggle_missing(self, fake_supabase):
        assert ReviewRepository(fake_supabase).toggle_approval("missing") is None


class TestAdminRepository:
    """Test the admins whitelist lookup"""

    def test_is_admin(self, fake_supabase):
        fake_supabase.seed("admins", [{"id": "a1", "email": "owner@onium.com", "password": "x"}])
        repo = AdminRepository(fake_supabase)

        assert repo.is_admin("owner@onium.com") is True
        assert repo.is_admin("someone@else.com") is False

    def test_find_by_email_returns_only_id_and_email(self, fake_supabase):
        fake_supabase.seed("admins", [{"id": "a1", "email": "owner@onium.com", "password": "x"}])

        row = AdminRepository(fake_supabase).find_by_email("owner@onium.com")

        assert row == {"id": "a1", "email": "owner@onium.com"}

    def test_custom_table(self, fake_supabase):
        fake_supabase.seed("staff", [{"id": "s1", "email": "staff@onium.com"}])

        assert AdminRepository(fake_supabase, table="staff").is_admin("staff@onium.com") is True
