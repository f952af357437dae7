"""Enumerations for domain models."""

from enum import Enum


class AccountType(str, Enum):
    """Kinds of money containers."""

    BANK = "bank"
    CASH = "cash"
    CREDIT = "credit"


class TransactionType(str, Enum):
    """Direction of a transaction; also used to classify categories."""

    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    """Settlement status. Only PAID transactions count towards a balance."""

    PENDING = "pending"
    PAID = "paid"


class MemberRole(str, Enum):
    """Roles a user can hold inside an organization."""

    OWNER = "owner"
    MEMBER = "member"
