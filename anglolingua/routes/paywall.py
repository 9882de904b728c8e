"""
Paywall routes. There is no payment processing: upgrading just flips the
locally persisted tier.
"""

from fastapi import APIRouter, Depends

from anglolingua.catalog_data import PREMIUM_FEATURES
from anglolingua.context import SessionContext, get_context

router = APIRouter(prefix="/api/paywall", tags=["paywall"])


@router.get("")
async def paywall(ctx: SessionContext = Depends(get_context)) -> dict:
    user = ctx.require_user()
    return {"features": PREMIUM_FEATURES, "is_premium": user.is_premium}


@router.post("/upgrade")
async def upgrade(ctx: SessionContext = Depends(get_context)) -> dict:
    ctx.require_user()
    ctx.progress.upgrade_to_premium()
    return {
        "user": ctx.user.model_dump(mode="json"),
        "message": "Congratulations! You've upgraded to Premium. All features are now unlocked.",
        "redirect": "/home",
    }
