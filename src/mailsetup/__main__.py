# =============================================================================
# mailsetup Entry Point for `python -m mailsetup`
# =============================================================================
# Equivalent to running the 'mailsetup' command after installation.
# =============================================================================

import sys

from mailsetup.app import main

if __name__ == "__main__":
    sys.exit(main())
