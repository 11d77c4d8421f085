"""Hand links to the desktop: torrent client and web browser."""

import logging
import platform
import subprocess
import webbrowser

logger = logging.getLogger(__name__)


def open_magnet(magnet: str) -> bool:
    """Open magnet link using system protocol handler (bypasses browser)."""
    try:
        system = platform.system()
        if system == "Darwin":
            subprocess.run(["open", magnet], check=True, capture_output=True)
        elif system == "Linux":
            subprocess.run(["xdg-open", magnet], check=True, capture_output=True)
        elif system == "Windows":
            subprocess.run(["start", "", magnet], shell=True, check=True, capture_output=True)
        else:
            logger.warning("Don't know how to open magnet links on %s", system)
            return False
        return True
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        logger.warning("Failed to open magnet link: %s", e)
        return False


def open_url(url: str) -> bool:
    """Open a web page in the default browser."""
    if not url:
        return False
    opened = webbrowser.open(url)
    if not opened:
        logger.warning("No browser available to open %s", url)
    return opened
