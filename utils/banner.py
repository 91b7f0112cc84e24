import os
from datetime import datetime, timezone

# Global flag to ensure banner is only shown once
_banner_shown = False

BANNER = r"""
 _                                         _        _
(_)_ __ ___   __ ___  __      _ __   ___  _ __| |_ __ _| |
| | '_ ` _ \ / _` \ \/ /____ | '_ \ / _ \| '__| __/ _` | |
| | | | | | | (_| |>  <_____|| |_) | (_) | |  | || (_| | |
|_|_| |_| |_|\__,_/_/\_\     | .__/ \___/|_|   \__\__,_|_|
                             |_|
"""


def build_label():
    """Version label from the deploy environment (GIT_HASH/BUILD_TIME), or 'local'"""
    git_hash = os.environ.get('GIT_HASH', '')[:8]
    build_time = os.environ.get('BUILD_TIME')
    if not git_hash and not build_time:
        return 'local'
    return f"{git_hash or 'unknown'} ({build_time or 'unknown build time'})"


def print_startup_banner(config):
    """Print which backend, mail server and language the portal starts with"""
    global _banner_shown

    if _banner_shown:
        return
    _banner_shown = True

    mail = config.get('MAIL_SERVER') or 'not configured (confirmations are simulated)'

    print("\033[96m" + BANNER + "\033[0m")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print(f"   Build:      {build_label()}")
    print(f"   Started:    {datetime.now(timezone.utc):%Y-%m-%d %H:%M:%S UTC}")
    print(f"   Backend:    {config.get('BACKEND_URL')}")
    print(f"   Mail:       {mail}")
    print(f"   Language:   {config.get('DEFAULT_LANGUAGE', 'en')}")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print("\033[93mStarting IMAX customer portal...\033[0m")
    print()
