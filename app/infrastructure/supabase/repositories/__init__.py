"""Platform-backed repositories."""

from app.infrastructure.supabase.repositories.application_repo import (
    SupabaseApplicationRepository,
)
from app.infrastructure.supabase.repositories.task_repo import SupabaseTaskRepository

__all__ = [
    "SupabaseApplicationRepository",
    "SupabaseTaskRepository",
]
