from properties.generators import (
    GeneratorConfig,
    SequenceGenerator,
    SimilarSequenceGenerator,
    EdgeCaseGenerator,
    generate_random_sequences,
    generate_similar_sequences,
    generate_edge_cases,
    generate_strings
)


__all__ = [
    "GeneratorConfig",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "EdgeCaseGenerator",
    "generate_random_sequences",
    "generate_similar_sequences",
    "generate_edge_cases",
    "generate_strings"
]
