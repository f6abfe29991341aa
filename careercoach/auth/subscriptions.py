## Subscription levels and AI-tool entitlement
from typing import Literal

from careercoach.settings import settings

SubscriptionLevel = Literal["free", "pro", "pro_plus"]
LEVELS: tuple[str, ...] = ("free", "pro", "pro_plus")


def get_user_subscription_level(user_id: str) -> SubscriptionLevel:
    level = settings.subscription_overrides.get(user_id, settings.default_subscription_level)
    # Unknown plan names are treated as the lowest tier
    return level if level in LEVELS else "free"


def can_use_ai_tools(level: SubscriptionLevel) -> bool:
    return level != "free"
