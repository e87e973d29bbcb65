"""Employee review routes."""

import logging

from fastapi import APIRouter, BackgroundTasks

from ...components.integrations.sheets.service import record_review_sync
from ...components.notifications.service import send_review_notification_sync
from ...components.reviews.config import review_config_payload
from ...components.reviews.schemas import ReviewSubmit
from ...components.reviews.service import build_review_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("/config")
def get_review_config():
    return {"success": True, "config": review_config_payload()}


@router.post("/submit")
def submit_review(data: ReviewSubmit, background_tasks: BackgroundTasks):
    review = build_review_result(data)
    # The supervisor is told whether the email went out, so this send is awaited.
    email_result = send_review_notification_sync(review)
    if not email_result.get("sent"):
        logger.warning("Review email not sent: %s", email_result.get("reason") or email_result.get("error"))
    background_tasks.add_task(record_review_sync, review)
    return {
        "success": True,
        "reviewId": review["reviewId"],
        "emailSent": bool(email_result.get("sent")),
        "message": (
            "Review submitted and email sent successfully"
            if email_result.get("sent")
            else "Review submitted but email not sent (check email configuration)"
        ),
        "submittedAt": review["submittedAt"],
        "review": review,
    }
