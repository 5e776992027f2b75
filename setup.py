from setuptools import setup, find_packages

setup(
    name="testforge-core",
    version="0.1.0",
    description="Pipeline de testes a partir de prompts - parsing, geracao Playwright e historico de execucao",
    author="Marcos Remar",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.25.0",
        "python-dotenv>=1.0.0",
        "litellm>=1.0.0",
        "structlog>=23.0.0",
    ],
    extras_require={
        "playwright": [
            "playwright>=1.40.0",
            "pytest-playwright>=0.4.0",
        ],
        "providers": [
            "openai>=1.0.0",
            "anthropic>=0.18.0",
            "ollama>=0.1.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
        "all": [
            "playwright>=1.40.0",
            "pytest-playwright>=0.4.0",
            "openai>=1.0.0",
            "anthropic>=0.18.0",
            "ollama>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "testforge=testforge_core.cli:main",
        ],
    },
)
