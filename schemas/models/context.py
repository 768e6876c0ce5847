"""
Per-request verification context.

One ProviderContext is created for each verification request and handed to
every provider checked in that request. It is scratch space: providers that
share an upstream lookup park the result here so the lookup runs once.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from schemas.models.analysis import EthAnalysis


@dataclass
class ProviderContext:
    eth_analysis: Optional[EthAnalysis] = None

    # Serialises the first fetch when providers run concurrently on one context
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)
