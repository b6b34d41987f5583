"""Kida environment binding.

Registers the asset helpers of one ``UrlManager`` as globals on a kida
Environment. Call once when the environment is created; the environment
and the manager are both immutable afterwards.
"""

from kida import Environment

from plume.templating.tags import AssetHelpers
from plume.urls.manager import UrlManager


def register_asset_globals(env: Environment, manager: UrlManager) -> Environment:
    """Add ``bundle_url``, ``composite_urls``, ``script_tags`` and friends to *env*.

    Returns *env* so the call can be chained at setup time.
    """
    for name, value in AssetHelpers(manager).as_globals().items():
        env.add_global(name, value)
    return env
