"""
Version information for the blackjack simulator.
"""

VERSION = "1.0.0"
BUILD_DATE = "2026-10-19"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
        'build_date': BUILD_DATE,
    }
