"""LLM service module.

Wraps the Segmind text-generation REST API behind a LangChain ``LLM``.

Key modules:
- llm.py: Segmind client, response-shape extractors and factory
"""
