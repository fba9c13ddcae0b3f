"""
Authenticated caller.

Identity lives in Supabase; we only carry the verified JWT claims
for the duration of a request and never persist users ourselves.
"""

from typing import Optional

from pydantic import BaseModel


class CurrentUser(BaseModel):
    """
    Verified token subject. id is the Supabase user id ("sub" claim).
    """

    id: str
    email: Optional[str] = None
    role: Optional[str] = None  # "authenticated" for signed-in users

    class Config:
        json_schema_extra = {
            "example": {
                "id": "uuid-from-supabase",
                "email": "planner@example.com",
                "role": "authenticated",
            }
        }
