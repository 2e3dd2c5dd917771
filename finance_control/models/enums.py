from __future__ import annotations

from enum import Enum


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class TransactionSubtype(str, Enum):
    FIXED = "FIXED"
    VARIABLE = "VARIABLE"


class TransactionSource(str, Enum):
    CASH = "CASH"
    PIX = "PIX"
    BANK_TRANSACTION = "BANK_TRANSACTION"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    OTHER = "OTHER"


class GoalType(str, Enum):
    SAVINGS = "SAVINGS"
    INVESTMENT = "INVESTMENT"
    DEBT_PAYOFF = "DEBT_PAYOFF"
    EMERGENCY_FUND = "EMERGENCY_FUND"
    PURCHASE = "PURCHASE"
    RETIREMENT = "RETIREMENT"
    OTHER = "OTHER"


def enum_values(enum_cls: type[Enum]) -> tuple[str, ...]:
    return tuple(str(member.value) for member in enum_cls)
