"""Allow ``python -m github_installation_sync``."""

from .main import main

main()
