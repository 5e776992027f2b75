"""
Modulo de execucao de testes.

Contem o executor que roda os steps no browser, o coletor que normaliza
os resultados e o agregador que consolida runs por suite.

Exporta:
- BaseExecutor: Interface abstrata para executores
- PlaywrightExecutor: Execucao com Playwright
- ExecutionCollector: start/finish de TestResults
- SuiteAggregator: Historico de execucao por suite
"""

from testforge_core.testing.execution.base_executor import BaseExecutor
from testforge_core.testing.execution.playwright_executor import PlaywrightExecutor
from testforge_core.testing.execution.collector import (
    Attachment,
    ExecutionCollector,
    ExecutionOutcome,
    ResultHandle,
    normalize_status,
)
from testforge_core.testing.execution.suite_aggregator import SuiteAggregator

__all__ = [
    "BaseExecutor",
    "PlaywrightExecutor",
    "Attachment",
    "ExecutionCollector",
    "ExecutionOutcome",
    "ResultHandle",
    "normalize_status",
    "SuiteAggregator",
]
