"""Schema layer: loading, normalization, search and example synthesis.

Three pure operations form the core, each taking the data it works on as
an explicit argument:

    [normalize()][kindex.schema.normalizer.normalize]
        Raw YAML mapping to sorted, validated kind records.
    [search()][kindex.schema.search.search]
        Case-insensitive substring filter over kind records.
    [synthesize_example()][kindex.schema.synthesizer.synthesize_example]
        Kind record to illustrative example event.

[load_schema()][kindex.schema.loader.load_schema] performs the only I/O,
and [Registry][kindex.schema.registry.Registry] ties the pieces together
around a single replaceable snapshot.
"""

from .loader import load_schema
from .normalizer import flatten_chain, normalize, parse_kind_number
from .registry import Registry
from .search import matches, search
from .synthesizer import content_placeholder, synthesize_example, synthesize_tag


__all__ = [
    "Registry",
    "content_placeholder",
    "flatten_chain",
    "load_schema",
    "matches",
    "normalize",
    "parse_kind_number",
    "search",
    "synthesize_example",
    "synthesize_tag",
]
