"""Error handling utilities."""


class EstateAdminError(Exception):
    """Base exception for the estate admin backend."""
    pass


class EntityValidationError(EstateAdminError):
    """A create or update request violates an entity rule."""
    pass


class AgentValidationError(EntityValidationError):
    """Agent creation references a missing or non-Agent user."""
    pass


class StoreError(EstateAdminError):
    """Durable store backend operation error."""
    pass


class SupabaseError(StoreError):
    """Supabase operation error."""
    pass
