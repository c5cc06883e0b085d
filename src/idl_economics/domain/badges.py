"""Volume badge tiers: thresholds (USD traded) and veIDL grants."""

from src.idl_common.checked_math import require_u64
from src.idl_common.constants import ProtocolConstants, get_protocol_constants
from src.idl_common.enums import BadgeTier


def required_volume(tier: BadgeTier, constants: ProtocolConstants | None = None) -> int:
    """Minimum volume_usd issue_badge accepts for `tier` (0 for NONE)."""
    c = constants or get_protocol_constants()
    return c.badge_volume_thresholds.get(BadgeTier(tier), 0)


def badge_ve_grant(tier: BadgeTier, constants: ProtocolConstants | None = None) -> int:
    """veIDL a badge of `tier` adds to total_ve_supply (0 for NONE)."""
    c = constants or get_protocol_constants()
    return c.badge_ve_grants.get(BadgeTier(tier), 0)


def qualifying_tier(volume_usd: int, constants: ProtocolConstants | None = None) -> BadgeTier:
    """Highest tier whose threshold volume_usd meets."""
    c = constants or get_protocol_constants()
    require_u64(volume_usd, "volume_usd")
    best = BadgeTier.NONE
    for tier, threshold in sorted(c.badge_volume_thresholds.items()):
        if volume_usd >= threshold:
            best = tier
    return best


def tier_name(tier: int) -> str:
    """Display name, or "Unknown" for a byte outside the mapping."""
    try:
        return BadgeTier(tier).display_name
    except ValueError:
        return "Unknown"
