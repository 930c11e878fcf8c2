"""
Account Models

An account is a financial holding: a bank account, a card, a loan or an
investment plan. Accounts arrive either from the bank-data aggregator
(linked) or from manual entry.

DESIGN DECISION: Account types form a closed set, and every type belongs
to exactly one AccountKind. All sign-convention and health logic branches
on the kind, never on ad-hoc string checks against the type.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.telemetry import get_logger

logger = get_logger(__name__)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class AccountKind(str, Enum):
    """Broad family an account type belongs to."""
    DEPOSITORY = "depository"
    CREDIT = "credit"
    INVESTMENT = "investment"
    LOAN = "loan"


class AccountType(str, Enum):
    """
    Supported account types.

    Mirrors the aggregator's type/subtype vocabulary, flattened,
    plus the legacy types used by manually tracked accounts.
    """
    # Depository
    CHECKING = "checking"
    SAVINGS = "savings"
    MONEY_MARKET = "money_market"
    CD = "cd"
    CASH_MANAGEMENT = "cash_management"
    PREPAID = "prepaid"
    HSA = "hsa"
    GIC = "gic"

    # Credit
    CREDIT_CARD = "credit_card"
    LINE_OF_CREDIT = "line_of_credit"
    OVERDRAFT = "overdraft"

    # Investment
    PLAN_401A = "401a"
    PLAN_401K = "401k"
    PLAN_403B = "403b"
    PLAN_457B = "457b"
    PLAN_529 = "529"
    BROKERAGE = "brokerage"
    ESA = "esa"
    IRA = "ira"
    ISA = "isa"
    LIRA = "lira"
    RIF = "rif"
    RSP = "rsp"
    PENSION = "pension"
    PROFIT_SHARING = "profit_sharing"
    ROTH_IRA = "roth_ira"
    ROTH_401K = "roth_401k"
    SEP_IRA = "sep_ira"
    SIMPLE_IRA = "simple_ira"
    SIPP = "sipp"
    STOCK_PLAN = "stock_plan"
    TSP = "tsp"
    TFSA = "tfsa"
    CUSTODIAL = "custodial"
    VARIABLE_ANNUITY = "variable_annuity"

    # Loan
    AUTO = "auto"
    COMMERCIAL = "commercial"
    CONSTRUCTION = "construction"
    CONSUMER = "consumer"
    HOME_EQUITY = "home_equity"
    MORTGAGE = "mortgage"
    STUDENT = "student"

    # Legacy / fallback
    LOAN = "loan"
    INVESTMENT = "investment"
    DEBT = "debt"

    @property
    def kind(self) -> AccountKind:
        return _KIND_BY_TYPE[self]


_DEPOSITORY_TYPES = (
    AccountType.CHECKING, AccountType.SAVINGS, AccountType.MONEY_MARKET,
    AccountType.CD, AccountType.CASH_MANAGEMENT, AccountType.PREPAID,
    AccountType.HSA, AccountType.GIC,
)
_CREDIT_TYPES = (
    AccountType.CREDIT_CARD, AccountType.LINE_OF_CREDIT, AccountType.OVERDRAFT,
)
_LOAN_TYPES = (
    AccountType.AUTO, AccountType.COMMERCIAL, AccountType.CONSTRUCTION,
    AccountType.CONSUMER, AccountType.HOME_EQUITY, AccountType.MORTGAGE,
    AccountType.STUDENT, AccountType.LOAN, AccountType.DEBT,
)

_KIND_BY_TYPE: dict[AccountType, AccountKind] = {}
for _type in AccountType:
    if _type in _DEPOSITORY_TYPES:
        _KIND_BY_TYPE[_type] = AccountKind.DEPOSITORY
    elif _type in _CREDIT_TYPES:
        _KIND_BY_TYPE[_type] = AccountKind.CREDIT
    elif _type in _LOAN_TYPES:
        _KIND_BY_TYPE[_type] = AccountKind.LOAN
    else:
        _KIND_BY_TYPE[_type] = AccountKind.INVESTMENT

DEBT_KINDS = frozenset({AccountKind.CREDIT, AccountKind.LOAN})


# =============================================================================
# ACCOUNT MODEL
# =============================================================================

class Account(BaseModel):
    """
    A financial holding.

    Debt accounts (credit and loan kinds) carry the amount owed as a
    positive balance.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Unique account identifier"
    )
    name: str = Field(
        default="",
        description="Display name"
    )
    type: AccountType = Field(
        default=AccountType.SAVINGS,
        description="Account type (savings when the aggregator reports none)"
    )
    balance: float = Field(
        default=0.0,
        description="Current balance (amount owed for debt accounts)"
    )
    apr: Optional[float] = Field(
        default=None,
        description="Annual interest rate, in percent"
    )
    min_payment: Optional[float] = Field(
        default=None,
        description="Minimum monthly payment"
    )
    credit_limit: Optional[float] = Field(
        default=None,
        description="Credit limit for credit accounts"
    )
    goal_target: Optional[float] = Field(
        default=None,
        description="Target amount when the account itself doubles as a goal"
    )
    linked: Optional[bool] = Field(
        default=None,
        description="True when synced from the aggregator, False when manually tracked"
    )
    institution_name: Optional[str] = Field(
        default=None,
        description="Institution name reported by the aggregator"
    )

    @field_validator('name', 'type', 'balance', mode='before')
    @classmethod
    def none_means_default(cls, v, info: ValidationInfo):
        """Aggregator nulls mean "no information", not invalid data."""
        return cls.model_fields[info.field_name].default if v is None else v

    @property
    def kind(self) -> AccountKind:
        return self.type.kind

    @property
    def is_debt(self) -> bool:
        return self.kind in DEBT_KINDS


# =============================================================================
# AGGREGATOR TYPE MAPPING
# =============================================================================

_DEPOSITORY_SUBTYPES = {
    "checking": AccountType.CHECKING,
    "savings": AccountType.SAVINGS,
    "money market": AccountType.MONEY_MARKET,
    "cd": AccountType.CD,
    "cash management": AccountType.CASH_MANAGEMENT,
    "prepaid": AccountType.PREPAID,
    "hsa": AccountType.HSA,
    "gic": AccountType.GIC,
}

_CREDIT_SUBTYPES = {
    "credit card": AccountType.CREDIT_CARD,
    "line of credit": AccountType.LINE_OF_CREDIT,
    "overdraft": AccountType.OVERDRAFT,
}

_INVESTMENT_SUBTYPES = {
    "401a": AccountType.PLAN_401A,
    "401k": AccountType.PLAN_401K,
    "403b": AccountType.PLAN_403B,
    "457b": AccountType.PLAN_457B,
    "529": AccountType.PLAN_529,
    "brokerage": AccountType.BROKERAGE,
    "esa": AccountType.ESA,
    "ira": AccountType.IRA,
    "isa": AccountType.ISA,
    "lira": AccountType.LIRA,
    "rif": AccountType.RIF,
    "rsp": AccountType.RSP,
    "pension": AccountType.PENSION,
    "profit sharing": AccountType.PROFIT_SHARING,
    "roth": AccountType.ROTH_IRA,
    "roth ira": AccountType.ROTH_IRA,
    "roth 401k": AccountType.ROTH_401K,
    "sep ira": AccountType.SEP_IRA,
    "simple ira": AccountType.SIMPLE_IRA,
    "sipp": AccountType.SIPP,
    "stock plan": AccountType.STOCK_PLAN,
    "tsp": AccountType.TSP,
    "tfsa": AccountType.TFSA,
    "custodial": AccountType.CUSTODIAL,
    "variable annuity": AccountType.VARIABLE_ANNUITY,
}

_LOAN_SUBTYPES = {
    "auto": AccountType.AUTO,
    "commercial": AccountType.COMMERCIAL,
    "construction": AccountType.CONSTRUCTION,
    "consumer": AccountType.CONSUMER,
    "home equity": AccountType.HOME_EQUITY,
    "mortgage": AccountType.MORTGAGE,
    "student": AccountType.STUDENT,
}

# aggregator type -> (subtype table, default when subtype is missing/unknown)
_SUBTYPE_TABLES = {
    "depository": (_DEPOSITORY_SUBTYPES, AccountType.CHECKING),
    "credit": (_CREDIT_SUBTYPES, AccountType.CREDIT_CARD),
    "investment": (_INVESTMENT_SUBTYPES, AccountType.INVESTMENT),
    "loan": (_LOAN_SUBTYPES, AccountType.LOAN),
}

# Types some aggregator payloads already report in flattened form
_DIRECT_TYPES = {
    AccountType.CHECKING, AccountType.SAVINGS, AccountType.CREDIT_CARD,
    AccountType.MORTGAGE, AccountType.AUTO, AccountType.STUDENT,
    AccountType.BROKERAGE, AccountType.IRA, AccountType.PLAN_401K,
    AccountType.ROTH_IRA,
}


def map_aggregator_account_type(
    aggregator_type: str,
    subtype: Optional[str] = None,
) -> AccountType:
    """
    Map the aggregator's (type, subtype) pair onto an AccountType.

    Direct matches on already-flattened types win. Otherwise the subtype
    is looked up in the table for the type's family, falling back to the
    family default. Unknown families map to savings.
    """
    key = (aggregator_type or "").strip().lower()

    for candidate in _DIRECT_TYPES:
        if candidate.value == key:
            return candidate

    if key in _SUBTYPE_TABLES:
        table, default = _SUBTYPE_TABLES[key]
        if not subtype:
            return default
        sub_key = subtype.strip().lower().replace("_", " ")
        return table.get(sub_key, default)

    logger.warning(
        "aggregator_type_unknown",
        aggregator_type=aggregator_type,
        subtype=subtype,
    )
    return AccountType.SAVINGS
