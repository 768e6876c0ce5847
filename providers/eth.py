"""ETH account analysis stamps.

One provider class, six configurations. Each configuration picks a field of
EthAnalysis and a minimum; the provider passes when the field is at least the
minimum and otherwise fails with the configuration's message.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from schemas.dto.requests.verify import RequestPayload
from schemas.dto.responses.verify import VerifiedPayload
from schemas.models.analysis import AnalysisField, Number
from schemas.models.context import ProviderContext
from services.account_analysis import AccountAnalysisFetcher
from shared.logging import get_logger, mask_address

log = get_logger(__name__)

MessageFormatter = Callable[[Number, Number], str]


def as_number(value: Number) -> Number:
    """Collapse integral floats to int, so `80.0` compares and prints as `80`."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def format_number(value: Number) -> str:
    """Render a number the way a JavaScript template literal does.

    Plain decimals for 1e-6 <= |x| < 1e21, exponent form (`1e-7`, `1e+21`)
    outside that range.
    """
    value = as_number(value)
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    sign = "-" if exponent.startswith("-") else "+"
    digits = exponent.lstrip("+-").lstrip("0")
    return f"{mantissa}e{sign}{digits}"


@dataclass(frozen=True)
class ProviderConfig:
    type: str
    minimum: Number
    data_key: AnalysisField
    failure_message_formatter: MessageFormatter


class AccountAnalysisProvider:
    def __init__(self, config: ProviderConfig, fetcher: AccountAnalysisFetcher) -> None:
        self.config = config
        self.type = config.type
        self._fetcher = fetcher

    async def verify(
        self, payload: RequestPayload, context: ProviderContext
    ) -> VerifiedPayload:
        address = payload.address
        analysis = await self._fetcher.get_analysis(address, context)
        actual = as_number(getattr(analysis, self.config.data_key))
        minimum = as_number(self.config.minimum)

        if actual < minimum:
            result = VerifiedPayload.failure(
                self.config.failure_message_formatter(minimum, actual)
            )
        else:
            result = VerifiedPayload.success(address)

        log.info(
            "provider_verified",
            provider=self.type,
            address=mask_address(address),
            valid=result.valid,
        )
        return result


# ── Failure messages ─────────────────────────────────────────────────────────


def _human_probability_message(minimum: Number, actual: Number) -> str:
    return (
        f"You received a score of {format_number(actual)} from our analysis. "
        f"You must have a score of {format_number(minimum)} or higher to obtain this stamp."
    )


def _days_active_message(minimum: Number, actual: Number) -> str:
    return (
        f"You have been active on Ethereum on {format_number(actual)} distinct days. "
        f"You must be active for {format_number(minimum)} days to obtain this stamp."
    )


def _gas_spent_message(minimum: Number, actual: Number) -> str:
    return (
        f"You have spent {format_number(actual)} ETH on Ethereum gas. "
        f"You must spend {format_number(minimum)} ETH on gas to obtain this stamp."
    )


def _transactions_message(minimum: Number, actual: Number) -> str:
    return (
        f"You have made {format_number(actual)} transactions on Ethereum. "
        f"You must make {format_number(minimum)} transactions to obtain this stamp."
    )


# ── Configurations ───────────────────────────────────────────────────────────

ETH_ENTHUSIAST = ProviderConfig(
    type="ETHScore#50",
    minimum=50,
    data_key="human_probability",
    failure_message_formatter=_human_probability_message,
)

ETH_ADVOCATE = ProviderConfig(
    type="ETHScore#75",
    minimum=75,
    data_key="human_probability",
    failure_message_formatter=_human_probability_message,
)

ETH_MAXI = ProviderConfig(
    type="ETHScore#90",
    minimum=90,
    data_key="human_probability",
    failure_message_formatter=_human_probability_message,
)

ETH_DAYS_ACTIVE = ProviderConfig(
    type="ETHDaysActive#50",
    minimum=50,
    data_key="number_days_active",
    failure_message_formatter=_days_active_message,
)

ETH_GAS_SPENT = ProviderConfig(
    type="ETHGasSpent#0.25",
    minimum=0.25,
    data_key="gas_spent",
    failure_message_formatter=_gas_spent_message,
)

ETH_TRANSACTIONS = ProviderConfig(
    type="ETHnumTransactions#100",
    minimum=100,
    data_key="number_transactions",
    failure_message_formatter=_transactions_message,
)

ETH_PROVIDER_CONFIGS: tuple[ProviderConfig, ...] = (
    ETH_ENTHUSIAST,
    ETH_ADVOCATE,
    ETH_MAXI,
    ETH_DAYS_ACTIVE,
    ETH_GAS_SPENT,
    ETH_TRANSACTIONS,
)


# ── Named constructors ───────────────────────────────────────────────────────


def ETHEnthusiastProvider(fetcher: AccountAnalysisFetcher) -> AccountAnalysisProvider:
    return AccountAnalysisProvider(ETH_ENTHUSIAST, fetcher)


def ETHAdvocateProvider(fetcher: AccountAnalysisFetcher) -> AccountAnalysisProvider:
    return AccountAnalysisProvider(ETH_ADVOCATE, fetcher)


def ETHMaxiProvider(fetcher: AccountAnalysisFetcher) -> AccountAnalysisProvider:
    return AccountAnalysisProvider(ETH_MAXI, fetcher)


def EthDaysActiveProvider(fetcher: AccountAnalysisFetcher) -> AccountAnalysisProvider:
    return AccountAnalysisProvider(ETH_DAYS_ACTIVE, fetcher)


def EthGasSpentProvider(fetcher: AccountAnalysisFetcher) -> AccountAnalysisProvider:
    return AccountAnalysisProvider(ETH_GAS_SPENT, fetcher)


def EthTransactionsProvider(fetcher: AccountAnalysisFetcher) -> AccountAnalysisProvider:
    return AccountAnalysisProvider(ETH_TRANSACTIONS, fetcher)


def build_eth_providers(fetcher: AccountAnalysisFetcher) -> list[AccountAnalysisProvider]:
    return [AccountAnalysisProvider(config, fetcher) for config in ETH_PROVIDER_CONFIGS]
