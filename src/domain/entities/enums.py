"""
Community Admin Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CommunityStatus(str, Enum):
    """Community status"""

    active = "active"
    inactive = "inactive"


class SubscriptionStatus(str, Enum):
    """Community subscription status"""

    pending = "pending"
    active = "active"
    expired = "expired"
    cancelled = "cancelled"


class BackupStatus(str, Enum):
    """Lifecycle of a deleted community backup"""

    pending = "pending"
    restored = "restored"
    permanently_deleted = "permanently_deleted"


class IssueStatus(str, Enum):
    """Issue tracking status"""

    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class PaymentStatus(str, Enum):
    """Payment status"""

    pending = "pending"
    completed = "completed"
    failed = "failed"
    overdue = "overdue"


class BookingStatus(str, Enum):
    """Common space booking status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    cancelled = "cancelled"


class AuditAction(str, Enum):
    """Admin actions recorded in the audit log"""

    create_community = "create_community"
    update_community = "update_community"
    delete_community = "delete_community"
    restore_community = "restore_community"
    other = "other"


class AuditStatus(str, Enum):
    """Outcome of an audited operation"""

    success = "success"
    failed = "failed"
    partial = "partial"
