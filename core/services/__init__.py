# =============================================================================
# core/services/ - Service Layer
# =============================================================================
# - storage_service.py: saving uploaded files to the upload directory
# =============================================================================

from .storage_service import StorageService

__all__ = ["StorageService"]
