"""
Modulo de geracao de testes.

Exporta:
- StepParser: prompt em linguagem natural -> StepModel[]
- KeywordStepInference / LLMStepInference: capacidades de inferencia
- ArtifactGenerator: StepModel[] -> modulo pytest-playwright + fingerprint
"""

from testforge_core.testing.generation.inference import (
    InferenceCapability,
    InferenceRequest,
    KeywordStepInference,
    LLMStepInference,
)
from testforge_core.testing.generation.step_parser import (
    ParseContext,
    ParseResult,
    StepParser,
    decode_payload,
)
from testforge_core.testing.generation.artifact_generator import (
    Artifact,
    ArtifactGenerator,
    GenerationOptions,
    PromptMeta,
    compute_fingerprint,
)

__all__ = [
    "InferenceCapability",
    "InferenceRequest",
    "KeywordStepInference",
    "LLMStepInference",
    "ParseContext",
    "ParseResult",
    "StepParser",
    "decode_payload",
    "Artifact",
    "ArtifactGenerator",
    "GenerationOptions",
    "PromptMeta",
    "compute_fingerprint",
]
