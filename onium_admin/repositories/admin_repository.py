"""
Admin Repository - whitelist of accounts allowed into the admin backend

Author: TM3
Date: 2025-10-17
"""
from typing import Optional

from supabase import Client

from onium_admin.core.config import settings
from onium_admin.core.database import get_supabase


class AdminRepository:
    """Looks up the admins whitelist table"""

    def __init__(self, client: Optional[Client] = None, table: Optional[str] = None):
        self.client = client or get_supabase()
        self.table = table or settings.ADMINS_TABLE

    def find_by_email(self, email: str) -> Optional[dict]:
        """Whitelist row for this email (id, email) or None"""
        response = (
            self.client.table(self.table)
            .select("id, email")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]

    def is_admin(self, email: str) -> bool:
        return self.find_by_email(email) is not None
