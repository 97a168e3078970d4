"""Glossary Generator - Cross-linked static HTML glossaries from a terms file."""
__version__ = "1.0.0"
__author__ = "Glossary Generator Team"

from glossgen.core.glossary_index import GlossaryIndex
from glossgen.core.models import DuplicatePolicy, GenerationJob, GenerationStatus
from glossgen.core.pipeline import GlossaryPipeline

__all__ = [
    "GlossaryIndex",
    "GlossaryPipeline",
    "GenerationJob",
    "GenerationStatus",
    "DuplicatePolicy",
]
