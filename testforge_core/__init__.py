"""
TestForge Core - prompts em linguagem natural viram testes de browser.

Modulos:
- testing: pipeline (prompts, steps, artefatos, resultados, suites)
- llm: gateway litellm e providers usados na inferencia de steps
"""

__version__ = "0.1.0"
