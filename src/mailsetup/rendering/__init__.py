# =============================================================================
# Rendering Module
# =============================================================================
# Turns images into something a terminal can show. Used for the contact
# photo in the wizard header.
# =============================================================================

from mailsetup.rendering.avatar import fit_size, render_avatar

__all__ = ["fit_size", "render_avatar"]
