# =============================================================================
# core/models/credentials.py - Credential Schemas
# =============================================================================
# Ad hoc record shapes used to show body decoding:
# - LoginRequest: decoded by hand from a raw JSON body
# - RegisterRequest: decoded by the content-type aware body parser
# - UserResponse: fixed JSON payload returned by GET /user
#
# They live for a single request and have no relationships.
# =============================================================================

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    Credentials posted to /login as JSON.

    Example:
        {"username": "Brian", "password": "12345"}
    """
    username: str = Field(..., description="Login name")
    password: str = Field(..., description="Plain-text password")


class RegisterRequest(BaseModel):
    """
    Credentials posted to /register.

    The same two fields are read from JSON keys, form fields or XML child
    elements, depending on the request Content-Type.
    """
    username: str = Field(..., description="Requested login name")
    password: str = Field(..., description="Requested password")


class UserResponse(BaseModel):
    """Canned user record. Fields are declared in sorted order."""
    password: str
    username: str
