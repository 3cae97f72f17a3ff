"""
Monthly aggregation of transaction points into a reward summary.
"""
import calendar
from dataclasses import dataclass, field

from .points_calculator import calculate_reward_points


@dataclass(frozen=True, order=True)
class MonthKey:
    """A calendar month of a specific year; ordered by year, then month"""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_date(cls, value):
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, value):
        """Parse a 'YYYY-MM' string"""
        year, sep, month = value.partition('-')
        if not sep or len(year) != 4 or len(month) != 2 or not (year.isdigit() and month.isdigit()):
            raise ValueError(f"Month key must look like YYYY-MM, got {value!r}")
        return cls(int(year), int(month))

    @property
    def month_name(self):
        """Full English month name, e.g. 'June'"""
        return calendar.month_name[self.month]

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class MonthlyPoints:
    """One line of the ordered monthly breakdown"""
    year: int
    month: str
    points: int


@dataclass
class RewardSummary:
    """Reward points of one customer, bucketed by month. Built per query, never stored."""
    customer_id: str
    customer_name: str
    monthly_points: dict = field(default_factory=dict)
    total_points: int = 0
    transactions: list = field(default_factory=list)

    @property
    def monthly_breakdown(self):
        return [
            MonthlyPoints(year=key.year, month=key.month_name, points=points)
            for key, points in sorted(self.monthly_points.items())
        ]

    @property
    def monthly_points_by_key(self):
        """Monthly buckets keyed by their 'YYYY-MM' rendering"""
        return {str(key): points for key, points in sorted(self.monthly_points.items())}


def base_points(transaction, month_key):
    """Points of a transaction under the tiered rule alone"""
    return calculate_reward_points(transaction.amount)


def aggregate(customer, transactions, transaction_points=base_points):
    """
    Build a RewardSummary for a customer from the given transactions.

    Args:
        customer: Object with ``id`` and ``name``
        transactions: Iterable of objects with ``amount`` and ``transaction_date``
        transaction_points: Callable ``(transaction, month_key) -> int`` scoring one transaction

    Returns:
        RewardSummary: Buckets hold only months with at least one transaction;
        transactions are kept in the order supplied.
    """
    transactions = list(transactions)
    monthly_points = {}

    for transaction in transactions:
        month_key = MonthKey.from_date(transaction.transaction_date)
        points = transaction_points(transaction, month_key)
        monthly_points[month_key] = monthly_points.get(month_key, 0) + points

    return RewardSummary(
        customer_id=customer.id,
        customer_name=customer.name,
        monthly_points=monthly_points,
        total_points=sum(monthly_points.values()),
        transactions=transactions,
    )
