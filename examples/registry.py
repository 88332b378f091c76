"""
Registry of available examples.
"""
from typing import List, TypedDict


class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    description: str


EXAMPLES: List[ExampleMetadata] = [
    {
        "path": "basic/00_bootstrap_park.py",
        "tags": ["basic", "p0"],
        "description": "Bootstraps a park from examples/config and reports table availability."
    },
    {
        "path": "basic/01_custom_factories.py",
        "tags": ["basic", "builder"],
        "description": "Registers custom factories and shows unsupported and cyclic resolution errors."
    },
]
