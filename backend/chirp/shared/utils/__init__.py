"""
Utilities

    from chirp.shared.utils import SecurityUtils
"""

from chirp.shared.utils.security import SecurityUtils, pwd_context

__all__ = ["SecurityUtils", "pwd_context"]
