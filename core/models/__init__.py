# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - credentials.py: login/registration credential pairs and the /user payload
# =============================================================================

from .credentials import LoginRequest, RegisterRequest, UserResponse

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
]
