"""
TestForge Core - Testing Module

Pipeline de geracao e acompanhamento de testes a partir de prompts.

Funcionalidades:
- Ciclo de vida de prompts (draft -> active -> archived)
- Parsing de linguagem natural em steps de automacao
- Geracao de testes pytest-playwright com fingerprint de conteudo
- Coleta e normalizacao de resultados de execucao
- Historico de execucao por suite

Uso basico:
    from testforge_core.testing import (
        InMemoryDocumentStore, KeywordStepInference, StepParser, TestPipeline,
    )

    store = InMemoryDocumentStore()
    pipeline = TestPipeline(store, StepParser(KeywordStepInference()))
    prompt = pipeline.lifecycle.create("Home", "Open homepage and check title",
                                       base_url="https://example.test")
    pipeline.lifecycle.submit(prompt.prompt_id)
    ref = await pipeline.prepare(prompt.prompt_id, environment)
"""

from testforge_core.testing.errors import (
    TestForgeError,
    InvalidStep,
    ParseFailure,
    IncompletePromptState,
    InvalidLifecycleState,
    DoubleFinish,
    DuplicateRun,
    RunValidationError,
    UnregisteredTestFile,
    PersistenceFailure,
    EntityNotFound,
)
from testforge_core.testing.storage import (
    DocumentStore,
    InMemoryDocumentStore,
    JsonDocumentStore,
)
from testforge_core.testing.generation import (
    ArtifactGenerator,
    GenerationOptions,
    KeywordStepInference,
    LLMStepInference,
    ParseContext,
    StepParser,
)
from testforge_core.testing.execution import (
    ExecutionCollector,
    ExecutionOutcome,
    PlaywrightExecutor,
    SuiteAggregator,
)
from testforge_core.testing.lifecycle import PromptLifecycleManager
from testforge_core.testing.pipeline import TestPipeline

__all__ = [
    "TestForgeError",
    "InvalidStep",
    "ParseFailure",
    "IncompletePromptState",
    "InvalidLifecycleState",
    "DoubleFinish",
    "DuplicateRun",
    "RunValidationError",
    "UnregisteredTestFile",
    "PersistenceFailure",
    "EntityNotFound",
    "DocumentStore",
    "InMemoryDocumentStore",
    "JsonDocumentStore",
    "ArtifactGenerator",
    "GenerationOptions",
    "KeywordStepInference",
    "LLMStepInference",
    "ParseContext",
    "StepParser",
    "ExecutionCollector",
    "ExecutionOutcome",
    "PlaywrightExecutor",
    "SuiteAggregator",
    "PromptLifecycleManager",
    "TestPipeline",
]
