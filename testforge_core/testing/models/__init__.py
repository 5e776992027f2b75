"""
Modelos de dados do pipeline.

Exporta:
- StepModel, ActionType (step.py)
- PromptRecord, GeneratedTestRef (prompt.py)
- EnvironmentConfig, Environment (environment.py)
- TestResult, StepResult (test_result.py)
- TestSuite, TestFile, ExecutionHistoryEntry (test_suite.py)
"""

from .step import (
    StepModel,
    ActionType,
    ACTION_ALIASES,
    HTTP_METHODS,
    normalize_action,
    expected_status,
    validate_step,
    selector_for,
    parse_assertion,
)

from .prompt import (
    PromptRecord,
    PromptMetadata,
    GeneratedTestRef,
    PromptStatus,
    TestType,
)

from .environment import (
    Environment,
    EnvironmentConfig,
    EnvironmentStatus,
    LLMConfiguration,
)

from .test_result import (
    TestResult,
    StepResult,
    Screenshot,
    ResultMetadata,
    TestStatus,
    StepStatus,
)

from .test_suite import (
    TestSuite,
    TestFile,
    ExecutionHistoryEntry,
    SuiteConfiguration,
    SuiteStatus,
    FileStatus,
    RunStatus,
)

__all__ = [
    # Steps
    "StepModel",
    "ActionType",
    "ACTION_ALIASES",
    "HTTP_METHODS",
    "normalize_action",
    "expected_status",
    "validate_step",
    "selector_for",
    "parse_assertion",
    # Prompts
    "PromptRecord",
    "PromptMetadata",
    "GeneratedTestRef",
    "PromptStatus",
    "TestType",
    # Ambientes
    "Environment",
    "EnvironmentConfig",
    "EnvironmentStatus",
    "LLMConfiguration",
    # Resultados
    "TestResult",
    "StepResult",
    "Screenshot",
    "ResultMetadata",
    "TestStatus",
    "StepStatus",
    # Suites
    "TestSuite",
    "TestFile",
    "ExecutionHistoryEntry",
    "SuiteConfiguration",
    "SuiteStatus",
    "FileStatus",
    "RunStatus",
]
