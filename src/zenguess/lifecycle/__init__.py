"""Market lifecycle: open -> closed (time) -> resolved (explicit)."""

from zenguess.lifecycle.status import derive_status, utc_now, with_derived_status

__all__ = ["derive_status", "with_derived_status", "utc_now"]
