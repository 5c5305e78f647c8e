"""
Shared API Schemas
==================
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Acknowledgement for operations that return no resource."""
    message: str
