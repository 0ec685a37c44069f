# =============================================================================
# Contacts Module
# =============================================================================
# Contact photo lookup for the account shown in the wizard header. Kept
# behind a narrow interface so the wizard never depends on how contacts are
# stored.
# =============================================================================

from mailsetup.contacts.photo import (
    ContactDirectory,
    ContactPhotoLoader,
    InMemoryContactDirectory,
    open_local_file,
)

__all__ = [
    "ContactDirectory",
    "ContactPhotoLoader",
    "InMemoryContactDirectory",
    "open_local_file",
]
