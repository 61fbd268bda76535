"""
MindTrack
=========
Social media wellness self-assessment service.

Layers (leaf-first):
- catalog: per-platform questionnaires
- scoring: deterministic wellness scoring engine
- recommendations: rule-based recommendation generator
- enrichment / llm: optional AI rewrite of the insight sentence
- analysis: score -> recommend -> enrich
- storage / api: PostgreSQL persistence and FastAPI routers
"""

__version__ = "1.0.0"
