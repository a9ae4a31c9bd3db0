"""Optional yfinance patch for networks that block fc.yahoo.com."""

import logging
import os

import yfinance.data

logger = logging.getLogger(__name__)

_ENABLED_VALUES = ("1", "true", "yes")


def cookie_check_disabled() -> bool:
    return os.getenv("YFINANCE_SKIP_COOKIE_CHECK", "0").lower() in _ENABLED_VALUES


def patch_yfinance() -> bool:
    """Bypass the cookie check when YFINANCE_SKIP_COOKIE_CHECK is set.

    Returns True when the patch was applied.
    """
    if not cookie_check_disabled():
        logger.debug("yfinance patch skipped (YFINANCE_SKIP_COOKIE_CHECK not set)")
        return False

    logger.info("Applying yfinance cookie check bypass patch")

    def _get_cookie_basic_patched(self, timeout=30):
        return True

    yfinance.data.YfData._get_cookie_basic = _get_cookie_basic_patched
    return True
