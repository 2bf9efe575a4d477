"""Domain enumerations for accounts, transactions and categories."""

from enum import Enum


class AccountType(str, Enum):
    """Kinds of money containers a user can open."""

    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    CREDIT_CARD = "CREDIT_CARD"

    @property
    def display_name(self) -> str:
        return _ACCOUNT_TYPE_LABELS[self]


class TransactionType(str, Enum):
    """Direction of a money movement."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Category(str, Enum):
    """Transaction categories, each bound to exactly one transaction type."""

    SALARY = "SALARY"
    FREELANCE = "FREELANCE"
    INVESTMENT = "INVESTMENT"
    OTHER_INCOME = "OTHER_INCOME"
    GROCERIES = "GROCERIES"
    DINING_OUT = "DINING_OUT"
    TRANSPORTATION = "TRANSPORTATION"
    ENTERTAINMENT = "ENTERTAINMENT"
    UTILITIES = "UTILITIES"
    RENT_MORTGAGE = "RENT_MORTGAGE"
    HEALTHCARE = "HEALTHCARE"
    SHOPPING = "SHOPPING"
    EDUCATION = "EDUCATION"
    TRAVEL = "TRAVEL"
    OTHER_EXPENSE = "OTHER_EXPENSE"

    @property
    def display_name(self) -> str:
        return _CATEGORY_META[self][0]

    @property
    def transaction_type(self) -> TransactionType:
        return _CATEGORY_META[self][1]


_ACCOUNT_TYPE_LABELS = {
    AccountType.CHECKING: "Checking Account",
    AccountType.SAVINGS: "Savings Account",
    AccountType.CREDIT_CARD: "Credit Card",
}

# Single source of truth for category labels and income/expense membership.
_CATEGORY_META = {
    Category.SALARY: ("Salary", TransactionType.INCOME),
    Category.FREELANCE: ("Freelance", TransactionType.INCOME),
    Category.INVESTMENT: ("Investment", TransactionType.INCOME),
    Category.OTHER_INCOME: ("Other Income", TransactionType.INCOME),
    Category.GROCERIES: ("Groceries", TransactionType.EXPENSE),
    Category.DINING_OUT: ("Dining Out", TransactionType.EXPENSE),
    Category.TRANSPORTATION: ("Transportation", TransactionType.EXPENSE),
    Category.ENTERTAINMENT: ("Entertainment", TransactionType.EXPENSE),
    Category.UTILITIES: ("Utilities", TransactionType.EXPENSE),
    Category.RENT_MORTGAGE: ("Rent/Mortgage", TransactionType.EXPENSE),
    Category.HEALTHCARE: ("Healthcare", TransactionType.EXPENSE),
    Category.SHOPPING: ("Shopping", TransactionType.EXPENSE),
    Category.EDUCATION: ("Education", TransactionType.EXPENSE),
    Category.TRAVEL: ("Travel", TransactionType.EXPENSE),
    Category.OTHER_EXPENSE: ("Other Expense", TransactionType.EXPENSE),
}


def categories_for(transaction_type: TransactionType) -> tuple[Category, ...]:
    """Return the categories valid for a transaction type, in enum order."""
    return tuple(
        category
        for category in Category
        if category.transaction_type is transaction_type
    )


def income_categories() -> tuple[Category, ...]:
    return categories_for(TransactionType.INCOME)


def expense_categories() -> tuple[Category, ...]:
    return categories_for(TransactionType.EXPENSE)


def is_income_category(category: Category) -> bool:
    return category.transaction_type is TransactionType.INCOME


def is_expense_category(category: Category) -> bool:
    return category.transaction_type is TransactionType.EXPENSE


__all__ = [
    "AccountType",
    "TransactionType",
    "Category",
    "categories_for",
    "income_categories",
    "expense_categories",
    "is_income_category",
    "is_expense_category",
]
