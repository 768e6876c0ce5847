"""
Account analysis models.

ModelResponse mirrors the JSON body returned by the eth-stamp-v2-predict model:

    {"data": {"human_probability": .., "gas_spent": ..,
              "n_days_active": .., "n_transactions": ..}}

EthAnalysis is the internal, immutable record the providers read from.
Every metric is a plain JSON number: ints stay ints and fractions stay floats.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, StrictInt

Number = Union[StrictInt, float]

# Fields a threshold provider may compare against its minimum
AnalysisField = Literal[
    "human_probability",
    "gas_spent",
    "number_days_active",
    "number_transactions",
]


class EthAnalysis(BaseModel):
    """Behavioural metrics for one address. Never mutated once built."""

    model_config = ConfigDict(frozen=True)

    human_probability: Number
    gas_spent: Number
    number_days_active: Number
    number_transactions: Number


class ModelData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    human_probability: Number
    gas_spent: Number
    n_days_active: Number
    n_transactions: Number


class ModelResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: ModelData

    def to_analysis(self) -> EthAnalysis:
        return EthAnalysis(
            human_probability=self.data.human_probability,
            gas_spent=self.data.gas_spent,
            number_days_active=self.data.n_days_active,
            number_transactions=self.data.n_transactions,
        )
