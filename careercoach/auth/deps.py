## Current user dependency + AI entitlement gate
from dataclasses import dataclass

from fastapi import Depends, Request

from careercoach.auth.subscriptions import (
    SubscriptionLevel,
    can_use_ai_tools,
    get_user_subscription_level,
)
from careercoach.settings import settings

class NotAuthenticated(Exception):
    pass

class NotEntitled(Exception):
    pass


@dataclass(frozen=True)
class CurrentUser:
    id: str
    subscription: SubscriptionLevel


def get_current_user(request: Request) -> CurrentUser:
    # Sign-in happens at the identity provider in front of us; it forwards the user id
    raw = request.headers.get(settings.user_id_header, "").strip()
    if not raw:
        raise NotAuthenticated()

    return CurrentUser(id=raw, subscription=get_user_subscription_level(raw))


def require_ai_access(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not can_use_ai_tools(user.subscription):
        raise NotEntitled("Upgrade your subscription to use this feature")
    return user
