"""Sample in-app notifications for the seeded accounts.

Every active account gets a handful of notifications drawn from a fixed
template list, and the first accounts also receive two platform-wide
announcements. Compliance notifications point at one of the earliest
parcels when any exist.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Sequence

from landregistry.core.types import (
    NotificationPriority,
    NotificationStatus,
    NotificationType,
)
from landregistry.notifications.models import Notification
from landregistry.registry.models import LandParcel, OwnerCandidate
from landregistry.repositories import resolve
from landregistry.seeding.decisions import Decisions

logger = logging.getLogger(__name__)

PER_USER_RANGE = (3, 8)
RELATED_PARCEL_COUNT = 10
SYSTEM_RECIPIENT_COUNT = 10

_HOUR = timedelta(hours=1)
_WEEK = timedelta(days=7)
_MONTH = timedelta(days=30)


@dataclass(frozen=True)
class NotificationTemplate:
    type: NotificationType
    priority: NotificationPriority
    title: str
    message: str
    icon: str
    action_text: str | None = None
    action_url: str | None = None


_T = NotificationType
_P = NotificationPriority

TEMPLATES: tuple[NotificationTemplate, ...] = (
    NotificationTemplate(
        _T.SYSTEM, _P.MEDIUM, "Welcome to RwaLandChain",
        "Your account has been successfully created. Complete your profile to get started.",
        "welcome", "Complete Profile", "/profile",
    ),
    NotificationTemplate(
        _T.SYSTEM, _P.LOW, "System Maintenance Scheduled",
        "Scheduled maintenance will occur on Sunday from 2:00 AM to 4:00 AM EAT.",
        "maintenance",
    ),
    NotificationTemplate(
        _T.SYSTEM, _P.HIGH, "New Feature Available",
        "Advanced search filters are now available for land parcel discovery.",
        "feature", "Explore", "/parcels",
    ),
    NotificationTemplate(
        _T.TRANSACTION, _P.HIGH, "Land Transfer Completed",
        "Your land parcel transfer has been successfully completed and recorded on the blockchain.",
        "transfer", "View Transaction",
    ),
    NotificationTemplate(
        _T.TRANSACTION, _P.MEDIUM, "Transaction Pending",
        "Your transaction is being processed. This may take a few minutes.",
        "pending",
    ),
    NotificationTemplate(
        _T.TRANSACTION, _P.URGENT, "Transaction Failed",
        "Your recent transaction failed due to insufficient gas. Please try again.",
        "error", "Retry",
    ),
    NotificationTemplate(
        _T.COMPLIANCE, _P.HIGH, "Compliance Inspection Due",
        "Your land parcel is due for compliance inspection within the next 30 days.",
        "inspection", "Schedule Inspection",
    ),
    NotificationTemplate(
        _T.COMPLIANCE, _P.URGENT, "Compliance Violation Detected",
        "A compliance violation has been detected on your property. Immediate action required.",
        "violation", "View Details",
    ),
    NotificationTemplate(
        _T.COMPLIANCE, _P.MEDIUM, "Compliance Score Updated",
        "Your land parcel compliance score has been updated to 92/100.",
        "score",
    ),
    NotificationTemplate(
        _T.COMPLIANCE, _P.LOW, "EcoCredits Awarded",
        "You have been awarded 50 EcoCredits for maintaining excellent environmental standards.",
        "eco",
    ),
    NotificationTemplate(
        _T.INHERITANCE, _P.HIGH, "Heir Designation Updated",
        "You have successfully updated the heir designation for your land parcel.",
        "heir",
    ),
    NotificationTemplate(
        _T.INHERITANCE, _P.URGENT, "Inheritance Process Initiated",
        "An inheritance process has been initiated for land parcel LP-2024-0001.",
        "inheritance", "Review",
    ),
    NotificationTemplate(
        _T.DISPUTE, _P.HIGH, "New Dispute Filed",
        "A dispute has been filed regarding your land parcel. Please review the details.",
        "dispute", "View Dispute",
    ),
    NotificationTemplate(
        _T.DISPUTE, _P.MEDIUM, "Dispute Resolution Update",
        "The arbitrator has made a decision on your land dispute case.",
        "resolution", "View Decision",
    ),
    NotificationTemplate(
        _T.GOVERNANCE, _P.MEDIUM, "New Governance Proposal",
        "A new proposal has been submitted for community voting. Your participation is important.",
        "proposal", "Vote Now", "/governance",
    ),
    NotificationTemplate(
        _T.GOVERNANCE, _P.LOW, "Voting Period Ending",
        "The voting period for Proposal #15 ends in 24 hours. Make sure to cast your vote.",
        "voting", "Vote",
    ),
    NotificationTemplate(
        _T.EXPROPRIATION, _P.URGENT, "Expropriation Notice",
        "Your land has been flagged for potential expropriation for public infrastructure "
        "development.",
        "expropriation", "View Details",
    ),
    NotificationTemplate(
        _T.EXPROPRIATION, _P.HIGH, "Compensation Available",
        "Compensation for your expropriated land is now available for claim.",
        "compensation", "Claim Compensation",
    ),
    NotificationTemplate(
        _T.SECURITY, _P.HIGH, "New Login Detected",
        "A new login to your account was detected from a different device.",
        "security",
    ),
    NotificationTemplate(
        _T.SECURITY, _P.URGENT, "Suspicious Activity",
        "Suspicious activity detected on your account. Please review your recent transactions.",
        "warning", "Review Activity",
    ),
)

SYSTEM_ANNOUNCEMENTS: tuple[NotificationTemplate, ...] = (
    NotificationTemplate(
        _T.SYSTEM, _P.MEDIUM, "Platform Update v2.0",
        "RwaLandChain has been updated with new features including advanced analytics "
        "and improved security.",
        "system",
    ),
    NotificationTemplate(
        _T.SYSTEM, _P.LOW, "Scheduled Maintenance Complete",
        "The scheduled maintenance has been completed successfully. All systems are now "
        "operational.",
        "system",
    ),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def template_data(
    notification: Notification,
    template: NotificationTemplate,
    parcels: Sequence[LandParcel],
    decisions: Decisions,
    now: datetime,
) -> None:
    """Attach the type-specific payload and related record."""
    if template.type == NotificationType.TRANSACTION:
        notification.data = {
            "transaction_hash": f"0x{decisions.randint(0, 2**256 - 1, 'transaction_hash'):064x}",
            "block_number": decisions.randint(18_000_000, 18_999_999, "block_number"),
            "gas_used": decisions.randint(21_000, 120_999, "gas_used"),
        }
    elif template.type == NotificationType.COMPLIANCE and parcels:
        parcel = decisions.choice(parcels, "related_parcel")
        notification.related_entity_type = "land_parcel"
        notification.related_entity_id = parcel.id
        notification.data = {
            "parcel_id": parcel.parcel_id,
            "compliance_score": decisions.randint(0, 99, "compliance_score"),
            "inspection_date": now.isoformat(),
        }
    elif template.type == NotificationType.GOVERNANCE:
        notification.data = {
            "proposal_id": f"PROP-{decisions.randint(1, 100, 'proposal_number')}",
            "proposal_title": "Update Land Use Compliance Rules",
            "voting_deadline": (now + _WEEK).isoformat(),
        }


def build_notification(
    user_id: str,
    template: NotificationTemplate,
    parcels: Sequence[LandParcel],
    decisions: Decisions,
    now: datetime,
) -> Notification:
    """Build one user notification with randomised read, archive and e-mail state."""
    notification = Notification(
        user_id=user_id,
        type=template.type,
        priority=template.priority,
        title=template.title,
        message=template.message,
        icon=template.icon,
        action_text=template.action_text,
        action_url=template.action_url,
    )
    template_data(notification, template, parcels, decisions, now)

    created_at = now - _MONTH * decisions.uniform(0.0, 1.0, "created_age")
    notification.created_at = created_at

    if decisions.chance(0.6, "read"):
        notification.status = NotificationStatus.READ
        # Never read before it was created.
        notification.read_at = max(
            created_at, now - _WEEK * decisions.uniform(0.0, 1.0, "read_age")
        )
    if decisions.chance(0.1, "archived"):
        notification.status = NotificationStatus.ARCHIVED
        notification.archived_at = now
    if decisions.chance(0.2, "expires"):
        notification.expires_at = now + _MONTH * decisions.uniform(0.0, 1.0, "expires_in")
    if decisions.chance(0.7, "email_sent"):
        notification.email_sent = True
        notification.email_sent_at = created_at + _HOUR * decisions.uniform(
            0.0, 1.0, "email_delay"
        )
    return notification


class NotificationSeeder:
    """Creates sample notifications when the notification store is empty."""

    def __init__(
        self,
        notifications: Any,
        users: Any,
        parcels: Any,
        decisions: Decisions,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._notifications = notifications
        self._users = users
        self._parcels = parcels
        self._decisions = decisions
        self._clock = clock

    async def run(self) -> int:
        """Return the number of notifications created (0 when skipped)."""
        if await resolve(self._notifications.count()) > 0:
            logger.info("Notifications already exist, skipping notification seeding")
            return 0

        users: list[OwnerCandidate] = await resolve(self._users.list_active())
        if not users:
            logger.warning("No active accounts found, cannot seed notifications")
            return 0
        parcels: list[LandParcel] = await resolve(
            self._parcels.list_earliest(RELATED_PARCEL_COUNT)
        )

        logger.info("Seeding notifications...")
        created = 0
        for user in users:
            for _ in range(self._decisions.randint(*PER_USER_RANGE, what="notification_count")):
                template = self._decisions.choice(TEMPLATES, "template")
                notification = build_notification(
                    user.user_id, template, parcels, self._decisions, self._clock()
                )
                await resolve(self._notifications.save(notification))
                created += 1
        logger.info("Created %d notifications", created)

        for announcement in SYSTEM_ANNOUNCEMENTS:
            for user in users[:SYSTEM_RECIPIENT_COUNT]:
                now = self._clock()
                notification = Notification(
                    user_id=user.user_id,
                    type=announcement.type,
                    priority=announcement.priority,
                    title=announcement.title,
                    message=announcement.message,
                    icon=announcement.icon,
                    created_at=now - _WEEK * self._decisions.uniform(0.0, 1.0, "system_age"),
                )
                await resolve(self._notifications.save(notification))
                created += 1

        logger.info("Notification seeding completed. Total notifications: %d", created)
        return created
