"""
Community Admin Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AuditAction,
    AuditStatus,
    BackupStatus,
    BookingStatus,
    CommunityStatus,
    IssueStatus,
    PaymentStatus,
    SubscriptionStatus,
)

# Export all entities
from .community import Community
from .resident import Resident
from .issue import Issue
from .worker import Worker
from .security import Security
from .community_manager import CommunityManager
from .amenity import Amenity
from .common_space_booking import CommonSpaceBooking
from .payment import Payment
from .community_subscription import CommunitySubscription
from .visitor import Visitor
from .pre_approval import PreApproval
from .notification import Notification
from .advertisement import Advertisement
from .deleted_community_backup import DeletedCommunityBackup
from .audit_log import AuditLogEntry

__all__ = [
    # Enums
    "AuditAction",
    "AuditStatus",
    "BackupStatus",
    "BookingStatus",
    "CommunityStatus",
    "IssueStatus",
    "PaymentStatus",
    "SubscriptionStatus",
    # Entities
    "Community",
    "Resident",
    "Issue",
    "Worker",
    "Security",
    "CommunityManager",
    "Amenity",
    "CommonSpaceBooking",
    "Payment",
    "CommunitySubscription",
    "Visitor",
    "PreApproval",
    "Notification",
    "Advertisement",
    "DeletedCommunityBackup",
    "AuditLogEntry",
]
